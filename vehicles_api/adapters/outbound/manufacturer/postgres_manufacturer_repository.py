"""Postgres-backed manufacturer repository adapter."""

from collections.abc import Iterable
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vehicles_api.application.ports.manufacturer_repository import ManufacturerRepository
from vehicles_api.domain.exceptions import PersistenceError
from vehicles_api.domain.value_objects.manufacturer import Manufacturer
from vehicles_api.infrastructure.db import get_db_session
from vehicles_api.infrastructure.logging.logger import logger

from .models import ManufacturerModel


class PostgresManufacturerRepository(ManufacturerRepository):
    """Postgres implementation of the manufacturer lookup."""

    def seed(self, manufacturers: Iterable[Manufacturer]) -> None:
        """
        Insert or refresh the seed manufacturers.

        Called once at process start; the table is only read afterwards.

        Args:
            manufacturers: Manufacturers to store
        """
        db: Session = get_db_session()
        try:
            for manufacturer in manufacturers:
                db.merge(ManufacturerModel(code=manufacturer.code, name=manufacturer.name))
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while seeding manufacturers: {str(e)}")
            raise PersistenceError("Could not seed manufacturers") from e
        finally:
            db.close()

    async def get(self, code: int) -> Optional[Manufacturer]:
        """
        Get a manufacturer by code.

        Args:
            code: Manufacturer code

        Returns:
            Manufacturer, or None if the code is unknown
        """
        db: Session = get_db_session()
        try:
            model = db.get(ManufacturerModel, code)
            if model is None:
                return None
            return Manufacturer(code=model.code, name=model.name)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting manufacturer {code}: {str(e)}")
            raise PersistenceError(f"Could not load manufacturer {code}") from e
        finally:
            db.close()

    async def list(self) -> list[Manufacturer]:
        """List all manufacturers ordered by code."""
        db: Session = get_db_session()
        try:
            models = db.query(ManufacturerModel).order_by(ManufacturerModel.code).all()
            return [Manufacturer(code=model.code, name=model.name) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing manufacturers: {str(e)}")
            raise PersistenceError("Could not list manufacturers") from e
        finally:
            db.close()
