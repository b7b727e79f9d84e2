"""
Stamp-in / Stamp-out und die Verwaltung der Zeitrahmen.
"""
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from worktime.core.clock import Clock, as_utc
from worktime.core.config import settings
from worktime.repositories.time_frames import TimeFrameRepository
from worktime.core.errors import AlreadyCheckedIn, InvalidTimeEntry, NoActiveSession

logger = logging.getLogger(__name__)


@dataclass
class TimeFrameView:
    """Lesemodell für die Liste: Bei offenen Rahmen wird end mit "jetzt" aufgefüllt."""
    id: uuid.UUID
    start: datetime
    end: datetime
    status: str
    is_open: bool


class TimeFrameService:

    def __init__(self, time_frames: TimeFrameRepository, clock: Clock):
        self.time_frames = time_frames
        self.clock = clock

    async def stamp_in(self, employee_email: str) -> datetime:
        start = self.clock.now()
        frame_id = await self.time_frames.insert_open(employee_email, start)
        if frame_id is None:
            logger.info("Stamp-in rejected for %s: already stamped in", employee_email)
            raise AlreadyCheckedIn()
        await self.time_frames.commit()
        logger.info("Stamp-in %s at %s (frame %s)", employee_email, start.isoformat(), frame_id)
        return start

    async def stamp_out(self, employee_email: str) -> datetime:
        open_frame = await self.time_frames.find_open(employee_email)
        if open_frame is None:
            logger.info("Stamp-out rejected for %s: no open time frame", employee_email)
            raise NoActiveSession()
        # Vor einem Rollback lesen, der geladene Instanzen verfallen lässt
        frame_id = open_frame.id

        end = self.clock.now()
        # Über die id abgleichen, damit ein danach parallel geöffneter Rahmen unberührt bleibt
        closed = await self.time_frames.close_by_id(employee_email, frame_id, end)
        if not closed:
            await self.time_frames.rollback()
            logger.info("Stamp-out for %s lost a race, frame %s already closed",
                        employee_email, frame_id)
            raise NoActiveSession()

        await self.time_frames.commit()
        logger.info("Stamp-out %s at %s (frame %s)", employee_email, end.isoformat(), frame_id)
        return end

    async def bulk_register(
        self, employee_email: str, entries: Sequence[tuple[datetime, datetime]]
    ) -> int:
        """
        Legt pro (start, end)-Eintrag einen geschlossenen Rahmen an. Alle Einträge
        werden zuerst validiert und dann in einer Transaktion geschrieben.
        """
        for i, (start, end) in enumerate(entries):
            if start is None or end is None:
                raise InvalidTimeEntry(f"Entry {i}: start and end are required")
            if as_utc(end) <= as_utc(start):
                raise InvalidTimeEntry(f"Entry {i}: end must be after start")

        if not entries:
            return 0

        count = await self.time_frames.insert_closed(
            employee_email, entries, status=settings.BULK_REGISTER_STATUS
        )
        await self.time_frames.commit()
        logger.info("Registered %d time frames for %s", count, employee_email)
        return count

    async def list_all(self, employee_email: str) -> list[TimeFrameView]:
        now = self.clock.now()
        frames = await self.time_frames.list_all(employee_email)
        return [
            TimeFrameView(
                id=f.id,
                start=as_utc(f.start_at),
                end=as_utc(now) if f.is_open else as_utc(f.end_at),
                status=f.status,
                is_open=f.is_open,
            )
            for f in frames
        ]
