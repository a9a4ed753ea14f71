"""
Process entry point.

Runs the API under uvicorn with the connection cap and keep-alive
timeout from settings.
"""
import uvicorn

from app.config import settings


def main() -> None:
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        limit_concurrency=settings.MAX_CONNECTIONS,
        timeout_keep_alive=settings.TIMEOUT_KEEP_ALIVE,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
