from worktime.models.employee import Employee
from worktime.models.time_frame import TimeFrame

__all__ = [
    "Employee",
    "TimeFrame",
]
