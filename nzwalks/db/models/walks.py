import uuid
from sqlalchemy import Column, String, Text, Float, DateTime, ForeignKey, Index, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from .base import Base, now_utc


class Walk(Base):
    __tablename__ = 'walks'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(50), nullable=False)
    description = Column(Text, nullable=False, default='')
    length_in_km = Column(Float, nullable=False)
    walk_image_url = Column(String(2048), nullable=True)
    region_id = Column(UUID(as_uuid=True), ForeignKey('regions.id', ondelete='CASCADE'), nullable=False)
    difficulty_id = Column(UUID(as_uuid=True), ForeignKey('difficulties.id'), nullable=False)
    created_at = Column(DateTime(timezone=True), default=now_utc)

    region = relationship("Region", back_populates="walks")
    difficulty = relationship("Difficulty", back_populates="walks")

    __table_args__ = (
        Index('idx_walks_region_id', 'region_id'),
        Index('idx_walks_difficulty_id', 'difficulty_id'),
        CheckConstraint('length_in_km > 0', name='ck_walks_length_positive'),
    )

    def __repr__(self) -> str:
        return f"<Walk {self.name}>"
