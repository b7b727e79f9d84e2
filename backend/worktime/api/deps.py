from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from worktime.core.clock import Clock
from worktime.core.database import get_db
from worktime.core.security import decode_token
from worktime.models.employee import Employee
from worktime.repositories.employees import EmployeeRepository
from worktime.repositories.time_frames import TimeFrameRepository
from worktime.services.status_service import StatusEvaluator
from worktime.services.time_frame_service import TimeFrameService

security = HTTPBearer(auto_error=False)

_clock = Clock()


def get_clock() -> Clock:
    return _clock


async def get_current_employee(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Employee:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise credentials_exception
    try:
        payload = decode_token(credentials.credentials)
        if payload.get("type") != "access":
            raise credentials_exception
        email = payload["sub"]
    except (ValueError, KeyError):
        raise credentials_exception

    employee = await EmployeeRepository(db).get_by_email(email)
    if employee is None or not employee.is_active:
        raise credentials_exception

    return employee


def get_status_evaluator(
    db: Annotated[AsyncSession, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> StatusEvaluator:
    return StatusEvaluator(TimeFrameRepository(db), EmployeeRepository(db), clock)


def get_time_frame_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> TimeFrameService:
    return TimeFrameService(TimeFrameRepository(db), clock)


CurrentEmployee = Annotated[Employee, Depends(get_current_employee)]
DB = Annotated[AsyncSession, Depends(get_db)]
Evaluator = Annotated[StatusEvaluator, Depends(get_status_evaluator)]
TimeFrames = Annotated[TimeFrameService, Depends(get_time_frame_service)]
