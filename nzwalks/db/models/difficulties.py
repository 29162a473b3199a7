import uuid
from sqlalchemy import Column, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base


# Reference rows seeded by the initial migration (and by the sqlite test schema).
DEFAULT_DIFFICULTIES = (
    (uuid.UUID("54466f17-02af-48e7-8ed3-5a4a8bfacf6f"), "Easy"),
    (uuid.UUID("ea294873-7a8c-4c0f-bfa7-a2eb492cbf8c"), "Medium"),
    (uuid.UUID("f808ddcd-b5e5-4d80-b732-1ca523e48434"), "Hard"),
)


class Difficulty(Base):
    __tablename__ = 'difficulties'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False, unique=True)

    walks = relationship("Walk", back_populates="difficulty")

    def __repr__(self) -> str:
        return f"<Difficulty {self.name}>"
