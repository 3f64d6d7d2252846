"""
Response helpers shared by the contact endpoint.

The CORS header set is fixed and attached explicitly instead of through
CORSMiddleware, so the method-not-allowed response stays without them.
"""

from fastapi import Response
from fastapi.responses import JSONResponse, PlainTextResponse
from typing import Any, Dict

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def cors_preflight_response() -> Response:
    """Acknowledge a browser pre-flight request: 200, no body"""
    return Response(status_code=200, headers=dict(CORS_HEADERS))


def json_response(content: Dict[str, Any], status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=dict(CORS_HEADERS))


def error_response(message: str, status_code: int) -> JSONResponse:
    return json_response({"error": message}, status_code=status_code)


def method_not_allowed_response() -> PlainTextResponse:
    return PlainTextResponse("Method not allowed", status_code=405)
