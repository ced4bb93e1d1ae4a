import logging
import sys
from contextlib import asynccontextmanager

from bson.errors import InvalidId
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.db.connection import disconnect
from app.internal import config
from app.middleware.logging import RequestLoggingMiddleware
from app.routers import router

logger = logging.getLogger(__name__)


def configureLogging(level=None):
    root = logging.getLogger()
    root.setLevel(level or config.LOG_LEVEL)
    if not any(getattr(h, "_app_handler", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
        handler._app_handler = True
        root.addHandler(handler)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configureLogging()
    logger.info("Animal weights API starting (env=%s)", config.ENV)
    yield
    disconnect()
    logger.info("Animal weights API stopped")


class AnimalWeightsApi(FastAPI):

    def __init__(self, *args, **kwargs):

        app_info = {
            "title": "animal weights & blog posts API",
            "lifespan": lifespan,
        }

        super().__init__(*args, **{**app_info, **kwargs})

        self.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"]
        )

        self.add_middleware(GZipMiddleware, minimum_size=1000)
        self.add_middleware(RequestLoggingMiddleware)

        self.include_router(router)


app = AnimalWeightsApi()


@app.exception_handler(ValueError)
async def value_error_exception_handler(request: Request, exc: ValueError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": str(exc)},
    )

@app.exception_handler(TypeError)
async def type_error_exception_handler(request: Request, exc: TypeError):
    logger.exception("Invalid input on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"message": "Invalid input"}
    )

@app.exception_handler(InvalidId)
async def invalid_id_exception_handler(request: Request, exc: InvalidId):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"message": "Invalid id"}
    )

@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={
            "message": "Invalid request",
            # rejected input is left out, it may not be JSON (NaN)
            "errors": [{"loc": jsonable_encoder(e["loc"]), "msg": e["msg"], "type": e["type"]} for e in exc.errors()],
        },
    )

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers
    )

@app.exception_handler(PyMongoError)
async def database_error_exception_handler(request: Request, exc: PyMongoError):
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "something went terribly wrong"},
    )
