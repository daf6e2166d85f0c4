"""FastAPI application for the quoter.

The service is a thin wrapper over the pure engine: every request carries
the pool snapshot it should be priced against.
"""

import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from quoter import __version__
from quoter.api.endpoints import router
from quoter.log_config import configure_logging

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("QUOTER_HOST", "0.0.0.0")
PORT = int(os.environ.get("QUOTER_PORT", "8000"))
DEBUG = os.environ.get("QUOTER_DEBUG", "false").lower() in ("true", "1", "yes")

# Maximum request body size (1 MB); a snapshot is a few kilobytes
MAX_REQUEST_SIZE = 1024 * 1024

app = FastAPI(
    title="Fund Swap Quoter",
    description="Quotes swaps against a managed multi-asset pool snapshot",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Run the quoter API server.

    Configuration via environment variables:
    - QUOTER_HOST: Host to bind to (default: 0.0.0.0)
    - QUOTER_PORT: Port to bind to (default: 8000)
    - QUOTER_DEBUG: Enable debug/reload mode (default: false)
    - QUOTER_LOG_VERBOSE: Log at debug level (default: false)
    """
    configure_logging(verbose=DEBUG)
    uvicorn.run(
        "quoter.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
