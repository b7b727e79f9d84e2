"""
Bootstrap-Tool: Mitarbeiter-Account anlegen.

Verwendung:
  python create_employee.py <email> <password> [birth_date YYYY-MM-DD]

Beispiel:
  python create_employee.py anna@example.com secretPassword123 2008-05-17
"""
import asyncio
import sys
from datetime import date

from worktime.core.database import AsyncSessionLocal, create_tables
from worktime.core.security import hash_password
from worktime.models.employee import Employee
from worktime.repositories.employees import EmployeeRepository


async def main(email: str, password: str, birth_date: date | None) -> None:
    if len(password) < 8:
        print("Error: password must be at least 8 characters long.")
        sys.exit(1)

    await create_tables()

    async with AsyncSessionLocal() as db:
        if await EmployeeRepository(db).get_by_email(email):
            print(f"Employee with e-mail '{email}' already exists.")
            sys.exit(0)

        employee = Employee(
            email=email,
            hashed_password=hash_password(password),
            birth_date=birth_date,
        )
        db.add(employee)
        await db.commit()
        await db.refresh(employee)
        print(f"✓ Employee '{email}' created (ID: {employee.id})")


if __name__ == "__main__":
    if len(sys.argv) not in (3, 4):
        print("Usage: python create_employee.py <email> <password> [birth_date YYYY-MM-DD]")
        sys.exit(1)

    birth = date.fromisoformat(sys.argv[3]) if len(sys.argv) == 4 else None
    asyncio.run(main(sys.argv[1], sys.argv[2], birth))
