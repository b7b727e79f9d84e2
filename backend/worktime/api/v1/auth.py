from fastapi import APIRouter, HTTPException, status

from worktime.api.deps import DB, CurrentEmployee
from worktime.core.security import verify_password, create_access_token
from worktime.repositories.employees import EmployeeRepository
from worktime.schemas.auth import LoginRequest, Token, EmployeeMe

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=Token)
async def login(payload: LoginRequest, db: DB):
    employee = await EmployeeRepository(db).get_by_email(payload.email)

    if not employee or not verify_password(payload.password, employee.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    if not employee.is_active:
        raise HTTPException(status_code=400, detail="Account is deactivated")

    return Token(access_token=create_access_token(employee.email))


@router.get("/me", response_model=EmployeeMe)
async def get_me(current_employee: CurrentEmployee):
    return current_employee
