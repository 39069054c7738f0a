"""
Appointment repository implementation using SQLAlchemy.

This module implements the IAppointmentRepository interface for persisting
and retrieving AppointmentSlot entities with the SQLAlchemy async ORM.
"""

import logging
from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from naretbox.domain.entities.appointment import AppointmentSlot
from naretbox.domain.exceptions import RepositoryError, SlotUnavailableError
from naretbox.domain.repositories.appointment_repository import IAppointmentRepository
from naretbox.domain.utils.datetime_utils import to_utc
from naretbox.infrastructure.persistence.sqlalchemy.models.appointment import AppointmentModel


class SQLAlchemyAppointmentRepository(IAppointmentRepository):
    """
    SQLAlchemy implementation of the appointment slot repository.

    Each write commits its own transaction. A unique-constraint violation on
    insert means another slot already starts at the same instant and is
    reported as ``SlotUnavailableError``.
    """

    def __init__(self, db_session: AsyncSession):
        """
        Initialize the repository with an active async session.

        Args:
            db_session: SQLAlchemy async session
        """
        self.db_session = db_session
        self.logger = logging.getLogger(self.__class__.__name__)

    async def get_by_id(self, slot_id: UUID) -> AppointmentSlot | None:
        try:
            model = await self.db_session.get(AppointmentModel, slot_id)
        except SQLAlchemyError as e:
            self.logger.error("Error retrieving slot %s: %s", slot_id, e)
            raise RepositoryError(
                repository=self.__class__.__name__, operation="get_by_id", original_exception=e
            ) from e
        return model.to_domain() if model else None

    async def create(self, slot: AppointmentSlot) -> AppointmentSlot:
        """
        Insert a new slot.

        Raises:
            SlotUnavailableError: If the psychologist already has a slot at this start
            RepositoryError: For any other database failure
        """
        model = AppointmentModel.from_domain(slot)
        try:
            self.db_session.add(model)
            await self.db_session.commit()
            await self.db_session.refresh(model)
        except IntegrityError as e:
            await self.db_session.rollback()
            self.logger.warning(
                "Slot for psychologist %s at %s already exists",
                slot.psychologist_id,
                slot.start_time.isoformat(),
            )
            raise SlotUnavailableError(
                psychologist_id=slot.psychologist_id, start_time=slot.start_time
            ) from e
        except SQLAlchemyError as e:
            await self.db_session.rollback()
            self.logger.error("Error creating slot %s: %s", slot.id, e)
            raise RepositoryError(
                repository=self.__class__.__name__, operation="create", original_exception=e
            ) from e

        self.logger.debug("Created slot %s", model.id)
        return model.to_domain()

    async def delete(self, slot_id: UUID) -> bool:
        try:
            result = await self.db_session.execute(
                delete(AppointmentModel).where(AppointmentModel.id == slot_id)
            )
            await self.db_session.commit()
        except SQLAlchemyError as e:
            await self.db_session.rollback()
            self.logger.error("Error deleting slot %s: %s", slot_id, e)
            raise RepositoryError(
                repository=self.__class__.__name__, operation="delete", original_exception=e
            ) from e
        return result.rowcount > 0

    async def list_by_psychologist(
        self,
        psychologist_id: str,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[AppointmentSlot]:
        query = select(AppointmentModel).where(AppointmentModel.psychologist_id == psychologist_id)
        if start_date is not None:
            query = query.where(AppointmentModel.end_time > to_utc(start_date))
        if end_date is not None:
            query = query.where(AppointmentModel.start_time < to_utc(end_date))
        return await self._fetch(query.order_by(AppointmentModel.start_time), "list_by_psychologist")

    async def list_by_patient(self, patient_id: str) -> list[AppointmentSlot]:
        query = (
            select(AppointmentModel)
            .where(AppointmentModel.patient_id == patient_id)
            .order_by(AppointmentModel.start_time)
        )
        return await self._fetch(query, "list_by_patient")

    async def _fetch(self, query, operation: str) -> list[AppointmentSlot]:
        try:
            result = await self.db_session.execute(query)
        except SQLAlchemyError as e:
            self.logger.error("Error during %s: %s", operation, e)
            raise RepositoryError(
                repository=self.__class__.__name__, operation=operation, original_exception=e
            ) from e
        return [model.to_domain() for model in result.scalars().all()]


# Alias for convenience
AppointmentRepository = SQLAlchemyAppointmentRepository
