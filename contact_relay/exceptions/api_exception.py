from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse, Response

from ..schemas.contact import RelayResult


class APIException(HTTPException):
    status_code: int
    detail: str
    description: str

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(self.status_code, detail or type(self).detail)


async def api_exception_handler(_: Request, exc: HTTPException) -> Response:
    return JSONResponse(
        RelayResult(success=False, error=str(exc.detail)).model_dump(exclude_none=True),
        exc.status_code,
        exc.headers,
    )
