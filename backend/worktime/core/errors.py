"""
Fachliche Fehler der Zeiterfassung.

Jeder Fehler trägt einen stabilen ``code`` und den passenden HTTP-Status;
main.py registriert einen Handler für die ganze Familie.
"""
from fastapi import status


class WorktimeError(Exception):
    code = "WORKTIME_ERROR"
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Request could not be processed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class StoreUnavailable(WorktimeError):
    code = "DATABASE_ERROR"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = "Error with the database"


class AlreadyCheckedIn(WorktimeError):
    code = "ALREADY_CHECKED_IN"
    status_code = status.HTTP_409_CONFLICT
    message = "Employee is already stamped in"


class NoActiveSession(WorktimeError):
    code = "NO_ACTIVE_TIME_FRAME"
    status_code = status.HTTP_409_CONFLICT
    message = "Employee is not stamped in"


class InvalidTimeEntry(WorktimeError):
    code = "VALIDATION_ERROR"
    status_code = 422
    message = "Malformed time entry"
