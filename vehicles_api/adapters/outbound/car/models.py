"""SQLAlchemy ORM models for cars."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

# Reuse the manufacturers declarative base so the foreign key resolves
from vehicles_api.adapters.outbound.manufacturer.models import Base, ManufacturerModel


class CarModel(Base):
    """SQLAlchemy model for cars table."""

    __tablename__ = "cars"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    condition = Column(String(10), nullable=False)  # NEW or USED
    manufacturer_code = Column(Integer, ForeignKey("manufacturers.code"), nullable=False)
    model = Column(String, nullable=False)
    production_year = Column(Integer, nullable=False)
    model_year = Column(Integer, nullable=False)
    mileage = Column(Integer, nullable=False)
    external_color = Column(String, nullable=False)
    body = Column(String, nullable=False)
    engine = Column(String, nullable=False)
    fuel_type = Column(String, nullable=False)
    number_of_doors = Column(Integer, nullable=False)
    lat = Column(Float, nullable=False)
    lon = Column(Float, nullable=False)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
    modified_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    manufacturer = relationship(ManufacturerModel, lazy="joined")
