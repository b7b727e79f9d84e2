"""
Schemas für die /time-Endpunkte.
"""
import uuid
from datetime import datetime

from pydantic import BaseModel, model_validator

from worktime.core.clock import as_utc
from worktime.services.status_service import TimeStatus


class TimeEntry(BaseModel):
    """Eine nachträglich gemeldete (bereits beendete) Arbeitssitzung."""
    start: datetime
    end: datetime

    @model_validator(mode="after")
    def end_after_start(self) -> "TimeEntry":
        if as_utc(self.end) <= as_utc(self.start):
            raise ValueError("end must be after start")
        return self


class StampInOut(BaseModel):
    start: datetime


class StampOutOut(BaseModel):
    end: datetime


class BulkRegisterOut(BaseModel):
    created: int


class StatusOut(BaseModel):
    status: TimeStatus


class TimeFrameOut(BaseModel):
    id: uuid.UUID
    start: datetime
    end: datetime          # solange der Rahmen offen ist, mit "jetzt" aufgefüllt
    status: str
    is_open: bool

    model_config = {"from_attributes": True}
