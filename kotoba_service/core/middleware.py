import time
import uuid
from fastapi import Request, Response
from fastapi.middleware.cors import CORSMiddleware
from .logging_config import request_id_var


async def logging_middleware(request: Request, call_next) -> Response:
    """
    Middleware to tag each request with a request_id and report processing time.
    """
    request_id = str(uuid.uuid4())
    token = request_id_var.set(request_id)

    start_time = time.time()
    try:
        response = await call_next(request)
    finally:
        request_id_var.reset(token)

    process_time = (time.time() - start_time) * 1000  # in milliseconds

    response.headers["X-Request-ID"] = request_id
    response.headers["X-Process-Time-MS"] = f"{process_time:.2f}"

    return response


def setup_cors_middleware(app, cors_origins: str):
    """
    Setup CORS middleware for the FastAPI app.

    Args:
        app: FastAPI application instance
        cors_origins: Comma-separated list of allowed origins
    """
    origins = [origin.strip() for origin in cors_origins.split(",") if origin.strip()]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
