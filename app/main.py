from http import HTTPStatus

from fastapi import Depends, FastAPI, Request, HTTPException, status
from fastapi.responses import JSONResponse, Response

from app.api.plain import router as plain_router
from app.api.v1.router import router as v1_router
from app.dependencies.store import get_store
from app.logging_config import setup_logging
from app.store.base import MappingStore

# The title shows up in the generated docs (/docs, /redoc) and the OpenAPI schema
app = FastAPI(title="URL Shortener API")

app.include_router(v1_router, prefix="/api/v1")

# Setup application logging
logger = setup_logging()


HEALTH_ALLOW = "OPTIONS, GET"


@app.get("/health", tags=["health"])
def health(store: MappingStore = Depends(get_store)):
    # count() round-trips to the store, so a broken database surfaces here
    return {"status": "ok", "mappings": store.count()}


@app.options("/health", tags=["health"])
def health_options():
    return Response(status_code=status.HTTP_200_OK, headers={"Allow": HEALTH_ALLOW})


@app.api_route("/health", methods=["POST", "PUT", "PATCH", "DELETE", "HEAD"], tags=["health"])
def health_method_not_allowed():
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method Not Allowed",
        headers={"Allow": HEALTH_ALLOW},
    )


# Catch-all /{short_token} routes, must be registered last
app.include_router(plain_router)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Wrap the 'detail' field of HTTPException responses in the error envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": HTTPStatus(exc.status_code).phrase,
            "message": exc.detail,
        },
        headers=exc.headers,
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    # Full stack trace plus the route that failed, for the log only
    logger.error(
        f"Unhandled exception: {exc.__class__.__name__}: {str(exc)}",
        exc_info=True,
        extra={
            "path": request.url.path,
            "method": request.method,
        },
    )

    # Return safe, static message to client (no internal details exposed)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal Server Error",
            "message": "An unexpected error occurred",
        },
    )
