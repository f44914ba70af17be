"""SQLAlchemy ORM models for manufacturers."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class ManufacturerModel(Base):
    """SQLAlchemy model for manufacturers table."""

    __tablename__ = "manufacturers"

    code = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String, nullable=False)
