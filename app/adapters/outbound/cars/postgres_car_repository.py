"""Postgres-backed car table adapter."""

from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.ports.car_repository import CarRepository, CarRow
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger

from .models import WRITABLE_FIELDS, CarModel


class PostgresCarRepository(CarRepository):
    """Postgres implementation of the cars table."""

    def _model_to_row(self, model: CarModel) -> CarRow:
        """
        Convert CarModel to a row dictionary.

        Args:
            model: SQLAlchemy model instance

        Returns:
            Row keyed by snake_case field names
        """
        row: CarRow = {"id": model.id}
        for field in WRITABLE_FIELDS:
            row[field] = getattr(model, field)

        # SQLite returns naive datetimes
        for field in ("created_at", "updated_at"):
            value = getattr(model, field)
            if value is not None and value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            row[field] = value
        return row

    def _writable(self, fields: CarRow) -> CarRow:
        """Keep only columns the application may write."""
        return {key: value for key, value in fields.items() if key in WRITABLE_FIELDS}

    async def select_all(self) -> list[CarRow]:
        """
        Select every car row, ordered by name ascending.

        Returns:
            List of rows
        """
        db: Session = get_db_session()
        try:
            models = db.query(CarModel).order_by(CarModel.name).all()
            return [self._model_to_row(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while selecting cars: {str(e)}")
            raise
        finally:
            db.close()

    async def insert(self, row: CarRow) -> None:
        """
        Insert one car row.

        Args:
            row: Row values without an id
        """
        db: Session = get_db_session()
        try:
            db.add(CarModel(**self._writable(row)))
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while inserting car {row.get('name')!r}: {str(e)}")
            raise
        finally:
            db.close()

    async def update(self, car_id: str, fields: CarRow) -> int:
        """
        Update the given fields of one car row.

        Args:
            car_id: Car identifier
            fields: Columns to overwrite

        Returns:
            Number of rows matched by the id
        """
        values = self._writable(fields)
        db: Session = get_db_session()
        try:
            query = db.query(CarModel).filter(CarModel.id == car_id)
            if not values:
                return query.count()
            values["updated_at"] = datetime.now(timezone.utc)
            affected = query.update(values, synchronize_session=False)
            db.commit()
            return affected
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while updating car {car_id}: {str(e)}")
            raise
        finally:
            db.close()

    async def delete(self, car_id: str) -> int:
        """
        Delete one car row.

        Args:
            car_id: Car identifier

        Returns:
            Number of rows deleted
        """
        db: Session = get_db_session()
        try:
            deleted = db.query(CarModel).filter(CarModel.id == car_id).delete(
                synchronize_session=False
            )
            db.commit()
            return deleted
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting car {car_id}: {str(e)}")
            raise
        finally:
            db.close()
