"""
Time-API – Stamp-in/out, nachgemeldete Sitzungen, Statusprüfung.
"""
from fastapi import APIRouter, status

from worktime.api.deps import CurrentEmployee, Evaluator, TimeFrames
from worktime.schemas.time_frame import (
    TimeEntry, StampInOut, StampOutOut, BulkRegisterOut, StatusOut, TimeFrameOut,
)

router = APIRouter(prefix="/time", tags=["time"])


@router.post("/stamp-in", response_model=StampInOut)
async def stamp_in(current_employee: CurrentEmployee, service: TimeFrames):
    start = await service.stamp_in(current_employee.email)
    return StampInOut(start=start)


@router.post("/stamp-out", response_model=StampOutOut)
async def stamp_out(current_employee: CurrentEmployee, service: TimeFrames):
    end = await service.stamp_out(current_employee.email)
    return StampOutOut(end=end)


@router.post("/new-times", response_model=BulkRegisterOut, status_code=status.HTTP_201_CREATED)
async def new_times(
    payload: list[TimeEntry],
    current_employee: CurrentEmployee,
    service: TimeFrames,
):
    """Erfasst bereits beendete Sitzungen, z.B. nachträglich gemeldete."""
    created = await service.bulk_register(
        current_employee.email,
        [(entry.start, entry.end) for entry in payload],
    )
    return BulkRegisterOut(created=created)


@router.get("", response_model=list[TimeFrameOut])
async def list_times(current_employee: CurrentEmployee, service: TimeFrames):
    return await service.list_all(current_employee.email)


@router.get("/status", response_model=StatusOut)
async def get_status(current_employee: CurrentEmployee, evaluator: Evaluator):
    """
    Compliance-Status der laufenden Sitzung. Verstöße kommen als Daten mit 200
    zurück, nie als Fehler.
    """
    return StatusOut(status=await evaluator.evaluate(current_employee.email))
