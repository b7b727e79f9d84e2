import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from worktime.core.config import settings
from worktime.core.database import create_tables
from worktime.api.v1.auth import router as auth_router
from worktime.api.v1.time_frames import router as time_router
from worktime.core.errors import InvalidTimeEntry, WorktimeError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Tabellen beim Start anlegen (SQLite / lokale Entwicklung)
    await create_tables()
    yield


app = FastAPI(
    title="Worktime API",
    description="Stamp-in/stamp-out and labor-time status",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(WorktimeError)
async def worktime_error_handler(request: Request, exc: WorktimeError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    # Gleiches Fehlerformat wie InvalidTimeEntry, Details von pydantic
    return JSONResponse(
        status_code=InvalidTimeEntry.status_code,
        content={"detail": jsonable_encoder(exc.errors()), "code": InvalidTimeEntry.code},
    )


API_PREFIX = "/api/v1"

app.include_router(auth_router, prefix=API_PREFIX)
app.include_router(time_router, prefix=API_PREFIX)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "Worktime API", "version": "1.0.0"}
