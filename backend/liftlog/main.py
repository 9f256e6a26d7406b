# liftlog/main.py
import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from liftlog.db import Database
from liftlog.errors import (
    IntegrityError,
    LiftlogError,
    NotFoundError,
    StorageUnavailableError,
    ValidationError,
)
from liftlog.init_db import init_db
from liftlog.routers.exercises import router as exercises_router
from liftlog.routers.workouts import router as workouts_router
from liftlog.settings import Settings, get_settings

log = logging.getLogger("uvicorn")

ERROR_STATUS = {
    ValidationError: 422,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    IntegrityError: status.HTTP_409_CONFLICT,
    StorageUnavailableError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(settings.DATABASE_URL, echo=settings.SQL_ECHO)
        # Fails startup with StorageUnavailableError if the store is unusable
        init_db(database, seed=settings.SEED_CATALOG)
        app.state.database = database
        log.info("liftlog ready (env=%s, db=%s)", settings.ENV, settings.DB_PATH)
        try:
            yield
        finally:
            database.dispose()

    app = FastAPI(
        title="liftlog API",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "exercises", "description": "Exercise catalog"},
            {"name": "workouts", "description": "Logged workouts and history"},
        ],
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_request_id_and_log(request: Request, call_next):
        req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        response.headers["X-Request-ID"] = req_id
        log.info("rid=%s %s %s -> %s in %.1fms",
                 req_id, request.method, request.url.path, response.status_code, duration_ms)
        return response

    @app.exception_handler(LiftlogError)
    async def liftlog_error_handler(request: Request, exc: LiftlogError):
        code = ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
        if code >= 500:
            log.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=code, content={"detail": exc.message, "code": exc.code})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # same body shape as every other error
        return await liftlog_error_handler(request, ValidationError.from_errors(exc.errors()))

    @app.get("/")
    def root():
        return {"ok": True, "name": "liftlog API"}

    @app.get("/ping")
    def ping():
        return {"pong": True}

    @app.get("/healthz")
    def healthz(request: Request):
        # Quick DB sanity check
        try:
            request.app.state.database.check()
            return {"status": "ok"}
        except Exception as e:
            return {"status": "degraded", "error": str(e)}

    @app.get("/version")
    def version():
        return {"version": settings.API_VERSION}

    # Routers
    app.include_router(exercises_router)
    app.include_router(workouts_router)
    return app


app = create_app()
