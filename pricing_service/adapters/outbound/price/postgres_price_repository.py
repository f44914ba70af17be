"""Postgres-backed price repository adapter."""

from collections.abc import Iterable
from decimal import Decimal
from typing import Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pricing_service.application.ports.price_repository import PriceRepository
from pricing_service.domain.entities.price import Price
from pricing_service.domain.exceptions import PersistenceError
from pricing_service.infrastructure.db import get_db_session
from pricing_service.infrastructure.logging.logger import logger

from .models import PriceModel

# Moves the serial sequence past the highest stored id, never backwards
_SYNC_ID_SEQUENCE = text(
    "SELECT setval(pg_get_serial_sequence('prices', 'id'), GREATEST(MAX(id), "
    "nextval(pg_get_serial_sequence('prices', 'id')) - 1, 1)) FROM prices"
)


class PostgresPriceRepository(PriceRepository):
    """Postgres implementation of price repository."""

    def _model_to_entity(self, model: PriceModel) -> Price:
        return Price(id=model.id, currency=model.currency, amount=Decimal(model.amount))

    def _sync_id_sequence(self, db: Session) -> None:
        """
        Keep the id sequence ahead of explicitly supplied identifiers.

        Only Postgres uses a sequence; other dialects pick max(id) + 1 on their own.

        Args:
            db: Open session, flushed with the explicit ids
        """
        if db.get_bind().dialect.name == "postgresql":
            db.execute(_SYNC_ID_SEQUENCE)

    def seed(self, prices: Iterable[Price]) -> None:
        """
        Insert seed prices whose identifiers are not stored yet.

        Existing rows are left untouched.

        Args:
            prices: Prices to insert (each must carry an id)
        """
        db: Session = get_db_session()
        try:
            for price in prices:
                if db.get(PriceModel, price.id) is None:
                    db.add(PriceModel(id=price.id, currency=price.currency, amount=price.amount))
            db.flush()
            self._sync_id_sequence(db)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while seeding prices: {str(e)}")
            raise PersistenceError("Could not seed prices") from e
        finally:
            db.close()

    async def get(self, entity_id: int) -> Optional[Price]:
        """
        Get a price by identifier.

        Args:
            entity_id: Price identifier

        Returns:
            Price entity, or None if not found
        """
        db: Session = get_db_session()
        try:
            model = db.get(PriceModel, entity_id)
            if model is None:
                return None
            return self._model_to_entity(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting price {entity_id}: {str(e)}")
            raise PersistenceError(f"Could not load price {entity_id}") from e
        finally:
            db.close()

    async def list(self) -> list[Price]:
        """List all prices ordered by identifier."""
        db: Session = get_db_session()
        try:
            models = db.query(PriceModel).order_by(PriceModel.id).all()
            return [self._model_to_entity(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing prices: {str(e)}")
            raise PersistenceError("Could not list prices") from e
        finally:
            db.close()

    async def save(self, entity: Price) -> Price:
        """
        Insert or overwrite a price.

        Args:
            entity: Price entity to save

        Returns:
            Stored price with its identifier
        """
        db: Session = get_db_session()
        try:
            model = db.get(PriceModel, entity.id) if entity.id is not None else None
            if model is None:
                model = PriceModel(id=entity.id)
                db.add(model)
            model.currency = entity.currency
            model.amount = entity.amount
            if entity.id is not None:
                db.flush()
                self._sync_id_sequence(db)

            db.commit()
            db.refresh(model)
            return self._model_to_entity(model)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while saving price {entity.id}: {str(e)}")
            raise PersistenceError("Could not save price") from e
        finally:
            db.close()

    async def delete(self, entity_id: int) -> bool:
        """
        Delete a price.

        Args:
            entity_id: Price identifier

        Returns:
            True if a row was removed
        """
        db: Session = get_db_session()
        try:
            deleted = db.query(PriceModel).filter(PriceModel.id == entity_id).delete()
            db.commit()
            return deleted > 0
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting price {entity_id}: {str(e)}")
            raise PersistenceError(f"Could not delete price {entity_id}") from e
        finally:
            db.close()
