from typing import Any, Mapping, Optional

from fastapi.responses import JSONResponse

def error_response(
    message: str,
    status_code: int = 500,
    headers: Optional[Mapping[str, str]] = None,
    **extra: Any,
):
    return JSONResponse(
        content={"success": False, "data": None, "error": message, **extra},
        status_code=status_code,
        headers=headers,
    )
