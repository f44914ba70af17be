"""Postgres-backed car repository adapter."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vehicles_api.application.ports.car_repository import CarRepository
from vehicles_api.domain.entities.car import Car
from vehicles_api.domain.exceptions import PersistenceError
from vehicles_api.domain.value_objects.condition import Condition
from vehicles_api.domain.value_objects.details import Details
from vehicles_api.domain.value_objects.location import Location
from vehicles_api.domain.value_objects.manufacturer import Manufacturer
from vehicles_api.infrastructure.db import get_db_session
from vehicles_api.infrastructure.logging.logger import logger

from .models import CarModel


def _as_utc(value: datetime) -> datetime:
    # SQLite returns naive datetimes
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class PostgresCarRepository(CarRepository):
    """Postgres implementation of car repository."""

    def _model_to_entity(self, model: CarModel) -> Car:
        """
        Convert CarModel to Car entity.

        Args:
            model: SQLAlchemy model instance

        Returns:
            Car entity
        """
        return Car(
            id=model.id,
            condition=Condition(model.condition),
            details=Details(
                manufacturer=Manufacturer(
                    code=model.manufacturer.code,
                    name=model.manufacturer.name,
                ),
                model=model.model,
                production_year=model.production_year,
                model_year=model.model_year,
                mileage=model.mileage,
                external_color=model.external_color,
                body=model.body,
                engine=model.engine,
                fuel_type=model.fuel_type,
                number_of_doors=model.number_of_doors,
            ),
            location=Location(lat=model.lat, lon=model.lon),
            created_at=_as_utc(model.created_at),
            modified_at=_as_utc(model.modified_at),
        )

    def _entity_to_model(self, car: Car, model: Optional[CarModel] = None) -> CarModel:
        """
        Copy Car entity fields onto a CarModel.

        Args:
            car: Car entity
            model: Existing model instance (for update) or None (for insert)

        Returns:
            CarModel instance
        """
        if model is None:
            model = CarModel(created_at=car.created_at)

        details = car.details
        model.condition = car.condition.value
        model.manufacturer_code = details.manufacturer.code
        model.model = details.model
        model.production_year = details.production_year
        model.model_year = details.model_year
        model.mileage = details.mileage
        model.external_color = details.external_color
        model.body = details.body
        model.engine = details.engine
        model.fuel_type = details.fuel_type
        model.number_of_doors = details.number_of_doors
        model.lat = car.location.lat
        model.lon = car.location.lon
        model.modified_at = car.modified_at
        return model

    async def get(self, car_id: int) -> Optional[Car]:
        """
        Get a car by identifier.

        Args:
            car_id: Car identifier

        Returns:
            Car entity, or None if not found

        Raises:
            PersistenceError: If the database fails
        """
        db: Session = get_db_session()
        try:
            model = db.get(CarModel, car_id)
            if model is None:
                return None
            return self._model_to_entity(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting car {car_id}: {str(e)}")
            raise PersistenceError(f"Could not load car {car_id}") from e
        finally:
            db.close()

    async def list(self) -> list[Car]:
        """
        List all cars ordered by identifier.

        Returns:
            List of all cars

        Raises:
            PersistenceError: If the database fails
        """
        db: Session = get_db_session()
        try:
            models = db.query(CarModel).order_by(CarModel.id).all()
            return [self._model_to_entity(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing cars: {str(e)}")
            raise PersistenceError("Could not list cars") from e
        finally:
            db.close()

    async def save(self, car: Car) -> Car:
        """
        Save a car (insert when id is None, update otherwise).

        Args:
            car: Car entity to save

        Returns:
            Stored car with its identifier

        Raises:
            PersistenceError: If the database fails or the car to update is gone
        """
        db: Session = get_db_session()
        try:
            if car.id is None:
                model = self._entity_to_model(car)
                db.add(model)
            else:
                model = db.get(CarModel, car.id)
                if model is None:
                    raise PersistenceError(f"Car {car.id} disappeared before update")
                self._entity_to_model(car, model)

            db.commit()
            db.refresh(model)
            return self._model_to_entity(model)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while saving car {car.id}: {str(e)}")
            raise PersistenceError("Could not save car") from e
        finally:
            db.close()

    async def delete(self, car_id: int) -> bool:
        """
        Delete a car.

        Args:
            car_id: Car identifier

        Returns:
            True if a row was removed

        Raises:
            PersistenceError: If the database fails
        """
        db: Session = get_db_session()
        try:
            deleted = db.query(CarModel).filter(CarModel.id == car_id).delete()
            db.commit()
            return deleted > 0
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting car {car_id}: {str(e)}")
            raise PersistenceError(f"Could not delete car {car_id}") from e
        finally:
            db.close()
