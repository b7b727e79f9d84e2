from datetime import time

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: str = "http://localhost:3000"

    # Datenbank – SQLite für lokale Entwicklung
    DATABASE_URL: str = "sqlite+aiosqlite:///./worktime.db"

    # Sicherheit
    SECRET_KEY: str = "dev_secret_key_change_in_production_min_32_chars!!"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Arbeitszeitregeln
    TIMEZONE: str = "Europe/Berlin"
    REST_DAY: int = 6  # date.weekday(): 0 = Montag ... 6 = Sonntag
    CORE_HOURS_START: time = time(6, 0)
    CORE_HOURS_END: time = time(22, 0)
    BREAK_AFTER_HOURS: int = 6
    AGE_OF_MAJORITY: int = 18

    # Label für Rahmen, die über /time/new-times angelegt werden.
    # Ob ein Rahmen offen ist, entscheidet allein end_at, nie dieses Label.
    BULK_REGISTER_STATUS: str = "open"

    @property
    def allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",")]

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
