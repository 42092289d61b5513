# Essential imports
import time
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from starlette import status
from routers import auth, users, products, cart, orders, images

# Import all models for SQLAlchemy relationship resolution
import models  # This triggers the imports in models/__init__.py

# Logging imports
from core.logging_config import setup_logging
from core.config import settings
from core.database import init_db, close_db
from core.exceptions import ShopError, ValidationError, GENERIC_ERROR_DETAIL
from middleware import RequestIDMiddleware
from utils.logger import get_logger

# CORS imports
from fastapi.middleware.cors import CORSMiddleware

# Initialize logging
setup_logging(
    log_level=settings.LOG_LEVEL,
    log_dir=settings.LOG_DIR
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(
        "Application startup complete",
        extra={"event": "startup", "env": settings.ENV, "upload_dir": settings.UPLOAD_DIR}
    )
    yield
    close_db()
    logger.info("Application shutting down", extra={"event": "shutdown"})


app = FastAPI(
    title="Storefront API",
    description="Backend API for a small storefront: accounts, catalog, cart, orders and images",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def internal_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": GENERIC_ERROR_DETAIL}
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Log every request with method, path, status code and duration.

    Also the last line of defence: an exception no handler claimed is logged
    with its stack trace and turned into the generic 500.
    """
    start_time = time.time()

    try:
        response = await call_next(request)
    except Exception as exc:
        logger.error(
            f"Unhandled exception: {str(exc)}",
            extra={
                "path": request.url.path,
                "method": request.method,
                "error_type": type(exc).__name__
            },
            exc_info=True
        )
        response = internal_error_response()

    duration = (time.time() - start_time) * 1000

    client_ip = request.client.host if request.client else "unknown"

    logger.info(
        f'{client_ip} - "{request.method} {request.url.path} HTTP/1.1" {response.status_code}',
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round(duration, 2),
            "client_ip": client_ip
        }
    )

    return response


# Outermost, so the request id is set before log_requests runs
app.add_middleware(RequestIDMiddleware)


@app.get("/health")
async def health_check():
    logger.debug("Health check requested")
    return {"status": "Healthy"}


@app.exception_handler(ShopError)
async def shop_error_handler(request: Request, exc: ShopError):
    """
    Map a domain error to its status code.

    Only 401 and 404 carry the error's own message; everything else is
    answered with the generic 500 body.
    """
    extra = {
        "path": request.url.path,
        "method": request.method,
        "error_kind": exc.kind.value,
        "error_type": type(exc).__name__
    }

    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"Request failed: {exc.message}", extra=extra, exc_info=exc)
    else:
        logger.info(f"Request rejected: {exc.message}", extra=extra)

    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.public_detail}
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """
    A missing or malformed field is a failed request like any other: log
    which fields were wrong and answer with the generic 500. Submitted
    values are never logged or echoed back.
    """
    logger.warning(
        "Request validation failed",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_kind": ValidationError.kind.value,
            "fields": [
                {"loc": list(error.get("loc", ())), "type": error.get("type")}
                for error in exc.errors()
            ]
        }
    )

    return internal_error_response()


# Including routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(products.router)
app.include_router(cart.router)
app.include_router(orders.router)
app.include_router(images.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
