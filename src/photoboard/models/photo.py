from photoboard.db.database import Base
from sqlalchemy import Boolean, Column, Date, DateTime, Integer, String
from sqlalchemy.sql import func


class Photo(Base):
    __tablename__ = "photos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    filename = Column(String, nullable=False, unique=True)

    # Fixed metadata fields
    date = Column(Date, nullable=True)
    grade = Column(String(32), nullable=True, index=True)
    order = Column(String, nullable=True)
    student = Column(Boolean, nullable=False, default=False)

    # Image size, read on upload
    pixel_width = Column(Integer, nullable=True)
    pixel_height = Column(Integer, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self) -> str:
        return f"<Photo(id={self.id}, filename={self.filename})>"
