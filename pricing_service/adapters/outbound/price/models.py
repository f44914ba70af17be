"""SQLAlchemy ORM models for prices."""

from sqlalchemy import Column, Integer, Numeric, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class PriceModel(Base):
    """SQLAlchemy model for prices table."""

    __tablename__ = "prices"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    currency = Column(String(3), nullable=False, default="USD")
    amount = Column(Numeric(precision=12, scale=2), nullable=False)
