import structlog
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from utils.response_helpers import error_response

logger = structlog.get_logger(__name__)

def setup_exception_handlers(app):

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.warning("HTTPException", path=request.url.path, detail=exc.detail)
        return error_response(
            exc.detail, status_code=exc.status_code, headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning("Validation error", path=request.url.path, errors=exc.errors())
        return JSONResponse(
            content={
                "success": False,
                "data": None,
                "error": "Invalid or missing request fields",
                "details": jsonable_errors(exc),
            },
            status_code=422
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled Exception", path=request.url.path, error=str(exc), exc_info=exc)
        return error_response("Something went wrong on the server", status_code=500)


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    # ctx may hold exception instances that JSONResponse cannot serialize
    return [
        {key: value for key, value in error.items() if key != "ctx"}
        for error in exc.errors()
    ]
