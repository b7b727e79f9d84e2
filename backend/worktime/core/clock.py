"""
Clock: einzige Quelle für "jetzt" in Statusprüfung und Stamp-Abläufen.
Wird als FastAPI-Dependency injiziert, damit Tests die Zeit festsetzen können.
"""
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from worktime.core.config import settings


class Clock:
    def __init__(self, tz: ZoneInfo | None = None):
        self.tz = tz or ZoneInfo(settings.TIMEZONE)

    def now(self) -> datetime:
        """Zeitzonenbehaftetes datetime in der konfigurierten lokalen Zone."""
        return datetime.now(self.tz)


class FixedClock(Clock):
    """Clock, die immer denselben Zeitpunkt liefert."""

    def __init__(self, instant: datetime, tz: ZoneInfo | None = None):
        super().__init__(tz)
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=self.tz)
        self.instant = instant

    def now(self) -> datetime:
        return self.instant.astimezone(self.tz)


def as_utc(value: datetime) -> datetime:
    """SQLite verliert tzinfo beim Lesen; gespeicherte Zeitpunkte sind immer UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
