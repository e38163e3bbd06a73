"""Postgres-backed inquiry repository adapter."""

from datetime import timezone
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.dtos.inquiry import Inquiry
from app.application.ports.inquiry_repository import InquiryRepository
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import logger

from .models import InquiryModel


class PostgresInquiryRepository(InquiryRepository):
    """Postgres implementation of inquiry repository."""

    def _model_to_dto(self, model: InquiryModel) -> Inquiry:
        """
        Convert InquiryModel to Inquiry DTO.

        Args:
            model: SQLAlchemy model instance

        Returns:
            Inquiry DTO
        """
        # Ensure created_at is timezone-aware (SQLite returns naive datetimes)
        created_at = model.created_at
        if created_at and created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        return Inquiry(
            id=model.id,
            name=model.name,
            phone=model.phone,
            email=model.email,
            message=model.message,
            car_id=model.car_id,
            created_at=created_at,
        )

    async def save(self, inquiry: Inquiry) -> Inquiry:
        """
        Save an inquiry.

        Args:
            inquiry: Inquiry DTO to save

        Returns:
            The stored inquiry with an id
        """
        db: Session = get_db_session()
        try:
            model = InquiryModel(
                id=inquiry.id or uuid4().hex,
                name=inquiry.name,
                phone=inquiry.phone,
                email=str(inquiry.email),
                message=inquiry.message,
                car_id=inquiry.car_id,
                created_at=inquiry.created_at,
            )
            db.add(model)
            db.commit()
            db.refresh(model)
            return self._model_to_dto(model)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while saving inquiry from {inquiry.email}: {str(e)}")
            raise
        finally:
            db.close()

    async def list(self) -> list[Inquiry]:
        """
        List all inquiries, oldest first.

        Returns:
            List of all inquiries
        """
        db: Session = get_db_session()
        try:
            models = db.query(InquiryModel).order_by(InquiryModel.created_at).all()
            return [self._model_to_dto(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing inquiries: {str(e)}")
            return []
        finally:
            db.close()
