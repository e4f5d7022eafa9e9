# streak_tracker/main.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from streak_tracker.config import settings
from streak_tracker.core.errors import StreakTrackerError, StorageError, ValidationError
from streak_tracker.database import engine, Base
from streak_tracker.models import goal, streak, tracking  # noqa: F401  (register tables)
from streak_tracker.routers import goals, streaks, coach
from streak_tracker.routers.tracking import screen_time_router, focus_router, rewards_router, shame_router
import logging
from sqlalchemy import exc as sa_exc

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(title="Streak Tracker - goals, daily completions and streaks", version="1.0")

if settings.allowed_origins is not None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted(settings.allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Include Routers
app.include_router(goals.router)
app.include_router(streaks.router)
app.include_router(streaks.completions_router)
app.include_router(screen_time_router)
app.include_router(focus_router)
app.include_router(rewards_router)
app.include_router(shame_router)
app.include_router(coach.router)


@app.exception_handler(StreakTrackerError)
async def streak_tracker_error_handler(request: Request, exc: StreakTrackerError):
    if isinstance(exc, StorageError):
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc.detail, exc_info=exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail, "code": exc.code})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=ValidationError.status_code,
        content={"detail": errors, "code": ValidationError.code},
    )


# Create DB Tables (local runs; migrations use Alembic)
@app.on_event("startup")
async def startup_event():
    # create tables (async). ignore duplicate-object errors from previous partial runs.
    async with engine.begin() as conn:
        try:
            await conn.run_sync(Base.metadata.create_all)
        except sa_exc.IntegrityError as e:
            msg = str(getattr(e, "orig", e))
            if "duplicate key value violates unique constraint" in msg or "already exists" in msg:
                logger.warning("Ignored duplicate DDL error during create_all: %s", msg)
            else:
                raise

@app.get("/")
def read_root():
    return {"message": "Welcome to Streak Tracker"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("streak_tracker.main:app", host="0.0.0.0", port=8000, reload=True)
