from typing import Any

from fastapi.responses import JSONResponse


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def passthrough_error_response(status_code: int, body: Any) -> JSONResponse:
    """
    Relay an upstream error. JSON bodies go out untouched, anything else is
    wrapped in the usual error envelope.
    """
    if isinstance(body, (dict, list)):
        return JSONResponse(status_code=status_code, content=body)
    message = str(body) if body else f"Upstream request failed with status {status_code}"
    return error_response(message, status_code)
