import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, Index, text
from sqlalchemy.orm import Mapped, mapped_column

from worktime.core.database import Base


class TimeFrame(Base):
    __tablename__ = "time_frames"
    __table_args__ = (
        # Höchstens ein offener Rahmen (end_at IS NULL) pro Mitarbeiter
        Index(
            "uq_time_frames_open_per_employee",
            "employee_email",
            unique=True,
            sqlite_where=text("end_at IS NULL"),
            postgresql_where=text("end_at IS NULL"),
        ),
        Index("ix_time_frames_employee_end", "employee_email", "end_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    # Kein FK: Mitarbeiterprofile liegen in einem eigenen Store
    employee_email: Mapped[str] = mapped_column(String(255), nullable=False)

    start_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    status: Mapped[str] = mapped_column(String(50), default="open")  # nur informatives Label

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    @property
    def is_open(self) -> bool:
        return self.end_at is None
