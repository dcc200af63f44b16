"""
Origin allow-list gate
"""
import logging
from typing import Dict, Optional, Sequence

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

ALLOWED_METHODS = ["GET", "DELETE", "OPTIONS", "POST", "PATCH", "PUT"]

logger = logging.getLogger(__name__)


def is_origin_allowed(origin: Optional[str], accepted_origins: Sequence[str]) -> bool:
    """Allow-listed origins pass, and so do requests without an Origin header"""
    return not origin or origin in accepted_origins


def cors_headers(origin: Optional[str], accepted_origins: Sequence[str], preflight: bool = False) -> Dict[str, str]:
    """Headers to add to a response for the given request origin"""
    if not is_origin_allowed(origin, accepted_origins):
        return {}

    headers = {}
    if origin:
        headers["Access-Control-Allow-Origin"] = origin
    if preflight:
        headers["Access-Control-Allow-Methods"] = ",".join(ALLOWED_METHODS)
    return headers


def add_origin_gate(app: FastAPI, accepted_origins: Sequence[str]) -> None:
    """Apply the gate to every response of the app, error responses included"""

    @app.middleware("http")
    async def origin_gate(request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception as e:
            # handlers registered for Exception run outside this middleware
            logger.error(f"Unhandled exception: {str(e)}", exc_info=True)
            response = JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Internal server error"},
            )

        headers = cors_headers(
            request.headers.get("origin"),
            accepted_origins,
            preflight=request.method == "OPTIONS",
        )
        response.headers.update(headers)
        return response
