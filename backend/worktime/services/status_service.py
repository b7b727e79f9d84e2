"""
Status-Service: Prüft, ob die laufende Sitzung eines Mitarbeiters die
Arbeitszeitregeln einhält (Ruhetag, Kernarbeitszeit, Pausenpflicht, Minderjährige).

Die Regeln werden in fester Reihenfolge geprüft, der erste Treffer gewinnt.
"""
import enum
import logging
from datetime import date, datetime, time, timedelta
from typing import TYPE_CHECKING

from worktime.core.clock import Clock, as_utc
from worktime.core.config import settings

if TYPE_CHECKING:
    from worktime.repositories.employees import EmployeeRepository
    from worktime.repositories.time_frames import TimeFrameRepository

logger = logging.getLogger(__name__)


class TimeStatus(str, enum.Enum):
    NOT_LOGGED_IN = "NOT_LOGGED_IN"
    HOLIDAY = "HOLIDAY"
    OK = "OK"
    OUTSIDE_CORE_WORKING_HOURS = "OUTSIDE_CORE_WORKING_HOURS"
    BREAK_NEEDED = "BREAK_NEEDED"


# ── Reine Prädikate ──────────────────────────────────────────────────────────

def is_rest_day(now: datetime, rest_day: int) -> bool:
    return now.weekday() == rest_day


def is_core_working_hours(time_of_day: time, core_start: time, core_end: time) -> bool:
    # Beide Grenzen exklusiv: Stamp-in um genau 06:00 liegt außerhalb
    return core_start < time_of_day < core_end


def elapsed_hours(start: datetime, now: datetime) -> int:
    """Volle Stunden zwischen start und now, Richtung null abgeschnitten."""
    return int((as_utc(now) - as_utc(start)) / timedelta(hours=1))


def years_before(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        # 29. Feb. in einem Nicht-Schaltjahr
        return day.replace(year=day.year - years, day=28)


def is_minor(birth_date: date | None, today: date, age_of_majority: int) -> bool:
    if birth_date is None:
        return False
    return birth_date > years_before(today, age_of_majority)


# ── Auswertung ───────────────────────────────────────────────────────────────

class StatusEvaluator:

    def __init__(
        self,
        time_frames: "TimeFrameRepository",
        employees: "EmployeeRepository",
        clock: Clock,
    ):
        self.time_frames = time_frames
        self.employees = employees
        self.clock = clock

    async def evaluate(self, employee_email: str) -> TimeStatus:
        open_frame = await self.time_frames.find_open(employee_email)
        if open_frame is None:
            return TimeStatus.NOT_LOGGED_IN

        now = self.clock.now()

        if is_rest_day(now, settings.REST_DAY):
            return TimeStatus.HOLIDAY

        last_closed = await self.time_frames.find_last_closed(employee_email)
        if last_closed is None:
            return TimeStatus.OK

        stamp_in = as_utc(open_frame.start_at)
        local_stamp_in = stamp_in.astimezone(self.clock.tz).time()
        if not is_core_working_hours(
            local_stamp_in, settings.CORE_HOURS_START, settings.CORE_HOURS_END
        ):
            return TimeStatus.OUTSIDE_CORE_WORKING_HOURS

        birth_date = await self.employees.birth_date(employee_email)

        if is_minor(birth_date, now.date(), settings.AGE_OF_MAJORITY):
            # Minderjährige: echt mehr als die Schwelle, 6h01m zählt bereits
            if as_utc(now) - stamp_in > timedelta(hours=settings.BREAK_AFTER_HOURS):
                return TimeStatus.BREAK_NEEDED
            return TimeStatus.OK

        hours = elapsed_hours(stamp_in, now)
        if hours >= settings.BREAK_AFTER_HOURS:
            logger.debug("Break needed for %s after %sh", employee_email, hours)
            return TimeStatus.BREAK_NEEDED

        return TimeStatus.OK
