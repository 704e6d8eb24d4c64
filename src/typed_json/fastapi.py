from __future__ import annotations

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from typed_json.errors import DecodeError, error_body
from typed_json.json_utils import InvalidJsonError
from typed_json.logging import get_logger


def install_decode_error_handlers(
    app: FastAPI,
    *,
    logger_name: str = "typed_json",
    invalid_json_detail: str = "Invalid JSON body",
    log_user_errors: bool = True,
) -> None:
    """Map decode failures raised inside routes to 400 responses.

    Registers handlers for:
    - DecodeError: body {"code", "message", "key"} with the precise decode code
    - InvalidJsonError: body {"code": "INVALID_JSON", "message", "key": None}

    Both are user errors, logged at INFO level without traceback.

    Example:
        >>> app = FastAPI()
        >>> install_decode_error_handlers(app)
    """
    logger = get_logger(logger_name)

    def _log(request: Request, body: dict[str, str | None]) -> None:
        if not log_user_errors:
            return
        logger.info(
            "decode_error",
            extra={
                "error_code": body["code"],
                "key": body["key"],
                "path": request.url.path,
                "method": request.method,
            },
        )

    async def _decode_error_handler(request: Request, exc: Exception) -> Response:
        if not isinstance(exc, DecodeError):
            raise exc
        body = error_body(exc)
        _log(request, body)
        return JSONResponse(content=body, status_code=400)

    async def _invalid_json_handler(request: Request, exc: Exception) -> Response:
        if not isinstance(exc, InvalidJsonError):
            raise exc
        body: dict[str, str | None] = {
            "code": "INVALID_JSON",
            "message": invalid_json_detail,
            "key": None,
        }
        _log(request, body)
        return JSONResponse(content=body, status_code=400)

    app.add_exception_handler(DecodeError, _decode_error_handler)
    app.add_exception_handler(InvalidJsonError, _invalid_json_handler)


__all__ = ["install_decode_error_handlers"]
