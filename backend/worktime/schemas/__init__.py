from worktime.schemas.auth import Token, LoginRequest, EmployeeMe
from worktime.schemas.time_frame import (
    TimeEntry, StampInOut, StampOutOut, BulkRegisterOut, StatusOut, TimeFrameOut,
)

__all__ = [
    "Token", "LoginRequest", "EmployeeMe",
    "TimeEntry", "StampInOut", "StampOutOut", "BulkRegisterOut", "StatusOut", "TimeFrameOut",
]
