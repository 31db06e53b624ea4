import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import config
from db import create_db_and_tables
from exceptions.simulation import SimulatedApiErrorException
from middleware.authentication import AuthenticationMiddleware
from services.seed import SeedService
from utils.config_validator import validate_or_exit
from web.app_router import app_router
from web.auth_router import auth_router
from web.order_router import order_router
from web.product_router import product_router
from web.responses import envelope


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown."""
    # Startup
    validate_or_exit(config)
    await create_db_and_tables()

    # A broken fixture must not keep the API from starting
    try:
        await SeedService.seed_all()
    except Exception as e:
        logging.error(f"[Startup] Database seeding failed: {e}", exc_info=e)

    logging.info(f"[Startup] Coffee House API listening on {config.WEBAPP_HOST}:{config.WEBAPP_PORT}")

    yield

    # Shutdown
    logging.warning('Shutting down..')


app = FastAPI(title="Coffee House API", version="1.0.0", lifespan=lifespan)

app.add_middleware(AuthenticationMiddleware)

if config.CORS_ALLOWED_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    logging.info(f"[Startup] CORS middleware enabled for origins: {config.CORS_ALLOWED_ORIGINS}")
else:
    logging.debug("[Startup] CORS middleware disabled (no allowed origins configured)")

app.include_router(app_router)
app.include_router(product_router)
app.include_router(auth_router)
app.include_router(order_router)


def format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        # loc starts with "body", "path" or "query"
        field = ".".join(str(part) for part in error.get("loc", ())[1:])
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    return "; ".join(messages) or "Invalid request"


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content=envelope(error=str(exc.detail)), headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logging.info(f"[Validation] {request.method} {request.url.path} rejected: {len(exc.errors())} error(s)")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=envelope(error=format_validation_errors(exc)),
    )


@app.exception_handler(SimulatedApiErrorException)
async def simulated_error_handler(request: Request, exc: SimulatedApiErrorException):
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=exc.to_response_body())


@app.exception_handler(Exception)
async def exception_handler(request: Request, exc: Exception):
    logging.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=envelope(error="Internal server error"),
    )


def main() -> None:
    uvicorn.run(app, host=config.WEBAPP_HOST, port=config.WEBAPP_PORT)
