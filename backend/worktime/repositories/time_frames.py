"""
Zugriff auf die TimeFrame-Tabelle.

Offen ist ein Rahmen nur über ``end_at IS NULL``. Schreibvorgänge, die nicht
kollidieren dürfen (Stamp-in, Stamp-out), sind einzelne bedingte Statements;
der partielle Unique-Index auf offene Rahmen weist einen zweiten parallelen
Stamp-in ab.
"""
import uuid
from datetime import datetime
from typing import Iterable, Sequence

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from worktime.core.clock import as_utc
from worktime.core.database import store_errors
from worktime.models.time_frame import TimeFrame


class TimeFrameRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_open(self, employee_email: str) -> TimeFrame | None:
        with store_errors("find_open"):
            result = await self.db.execute(
                select(TimeFrame)
                .where(
                    TimeFrame.employee_email == employee_email,
                    TimeFrame.end_at.is_(None),
                )
                .limit(1)
            )
            return result.scalars().first()

    async def find_last_closed(self, employee_email: str) -> TimeFrame | None:
        with store_errors("find_last_closed"):
            result = await self.db.execute(
                select(TimeFrame)
                .where(
                    TimeFrame.employee_email == employee_email,
                    TimeFrame.end_at.is_not(None),
                )
                .order_by(TimeFrame.end_at.desc())
                .limit(1)
            )
            return result.scalars().first()

    async def insert_open(self, employee_email: str, start: datetime) -> uuid.UUID | None:
        """
        Legt einen offenen Rahmen an. Gibt None zurück, wenn der Mitarbeiter schon
        einen hat; durch den Unique-Index sind Prüfung und Insert ein atomarer Schritt.
        """
        frame = TimeFrame(
            employee_email=employee_email,
            start_at=as_utc(start),
            end_at=None,
            status="open",
        )
        with store_errors("insert_open"):
            self.db.add(frame)
            try:
                await self.db.flush()
            except IntegrityError:
                await self.db.rollback()
                return None
        return frame.id

    async def close_by_id(self, employee_email: str, frame_id: uuid.UUID, end: datetime) -> bool:
        """Setzt end_at auf einem noch offenen Rahmen. False, wenn nicht gefunden oder schon geschlossen."""
        with store_errors("close_by_id"):
            result = await self.db.execute(
                update(TimeFrame)
                .where(
                    TimeFrame.id == frame_id,
                    TimeFrame.employee_email == employee_email,
                    TimeFrame.end_at.is_(None),
                )
                .values(end_at=as_utc(end))
                .execution_options(synchronize_session=False)
            )
        return result.rowcount == 1

    async def insert_closed(
        self,
        employee_email: str,
        entries: Iterable[tuple[datetime, datetime]],
        status: str,
    ) -> int:
        frames = [
            TimeFrame(
                employee_email=employee_email,
                start_at=as_utc(start),
                end_at=as_utc(end),
                status=status,
            )
            for start, end in entries
        ]
        with store_errors("insert_closed"):
            self.db.add_all(frames)
            await self.db.flush()
        return len(frames)

    async def list_all(self, employee_email: str) -> Sequence[TimeFrame]:
        with store_errors("list_all"):
            result = await self.db.execute(
                select(TimeFrame)
                .where(TimeFrame.employee_email == employee_email)
                .order_by(TimeFrame.start_at)
            )
            return result.scalars().all()

    async def commit(self) -> None:
        with store_errors("commit"):
            await self.db.commit()

    async def rollback(self) -> None:
        with store_errors("rollback"):
            await self.db.rollback()
