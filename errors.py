from fastapi import Request, status
from fastapi.responses import JSONResponse


class ResourceError(Exception):
    """Base for errors a resource operation reports back to the caller."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, kind: str, detail: str):
        super().__init__(detail)
        self.kind = kind
        self.detail = detail


class NotFound(ResourceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, kind: str, id: int | None = None):
        super().__init__(kind, f"{kind} not found")
        self.id = id


class PreconditionFailed(ResourceError):
    """Path id and payload id disagree on an update."""

    status_code = status.HTTP_412_PRECONDITION_FAILED

    def __init__(self, kind: str):
        super().__init__(kind, f"{kind} id mismatch")


class ValidationError(ResourceError):
    status_code = status.HTTP_422_UNPROCESSABLE_CONTENT

    def __init__(self, kind: str, detail: str | None = None):
        super().__init__(kind, detail or f"Invalid {kind}")


async def resource_error_handler(request: Request, exc: ResourceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
