"""Cross-origin headers and preflight handling."""

from __future__ import annotations

from fastapi import Request, Response, status

from app.core.error_handlers import unhandled_exception_response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
}


async def cors_middleware(request: Request, call_next):
    """Answer preflight requests directly and stamp CORS headers on everything else."""

    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)

    try:
        response = await call_next(request)
    except Exception as exc:
        # Errors that escaped the exception handlers still need the CORS headers.
        response = unhandled_exception_response(request, exc)

    for key, value in CORS_HEADERS.items():
        response.headers[key] = value
    return response


__all__ = ["CORS_HEADERS", "cors_middleware"]
