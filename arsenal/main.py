import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from arsenal.api.arsenal import router as arsenal_router
from arsenal.domain.errors import ArsenalError, ConfigMissingError, StoreReadError

# Configure logging
logging.basicConfig(
    level=os.environ.get("ARSENAL_LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Arsenal",
    version="0.1.0",
    description="Personal command-snippet manager backed by a single JSON file.",
)


def _status_for(exc: ArsenalError) -> int:
    if isinstance(exc, ConfigMissingError):
        return 404
    if isinstance(exc, StoreReadError) and exc.missing:
        return 404
    return 500


@app.exception_handler(ArsenalError)
async def arsenal_error_handler(request: Request, exc: ArsenalError) -> JSONResponse:
    status_code = _status_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}", exc_info=exc)
    else:
        logger.warning(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


@app.get("/health")
async def health() -> dict:
    """
    Lightweight health check endpoint.
    """
    return {"status": "ok"}


app.include_router(arsenal_router, prefix="/api", tags=["arsenal"])


if __name__ == "__main__":
    """
    Allow running `python -m arsenal.main` to start the Uvicorn development server.
    """
    import uvicorn

    uvicorn.run(
        "arsenal.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )
