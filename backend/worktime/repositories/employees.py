from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from worktime.core.database import store_errors
from worktime.models.employee import Employee


class EmployeeRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_email(self, email: str) -> Employee | None:
        with store_errors("get_employee"):
            result = await self.db.execute(select(Employee).where(Employee.email == email))
            return result.scalar_one_or_none()

    async def birth_date(self, email: str) -> date | None:
        with store_errors("birth_date"):
            result = await self.db.execute(
                select(Employee.birth_date).where(Employee.email == email)
            )
            return result.scalar_one_or_none()
