import uuid
from sqlalchemy import Column, String, DateTime
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, now_utc


class Region(Base):
    __tablename__ = 'regions'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    code = Column(String(100), nullable=False)
    name = Column(String(255), nullable=False)
    region_image_url = Column(String(2048), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)

    # Walks require a region; removing the region removes its walks
    walks = relationship("Walk", back_populates="region", cascade="save-update, merge, delete")

    def __repr__(self) -> str:
        return f"<Region {self.code} {self.name}>"
