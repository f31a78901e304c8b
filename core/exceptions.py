from typing import Optional
from fastapi import Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from core.templating import templates
from utils.logger import get_logger

logger = get_logger("Global_Exception")


class ContentAPIError(Exception):
    """Network or GraphQL failure talking to the content backend."""

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []


class BranchNotFound(Exception):
    pass


def render_not_found(request: Request):
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"subdomain": getattr(request.state, "subdomain", None)},
        status_code=404,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        logger.info("Not found", extra={"path": request.url.path})
        return render_not_found(request)
    logger.warning(f"HTTP {exc.status_code}: {exc.detail}", extra={"path": request.url.path})
    return templates.TemplateResponse(
        request,
        "somethingwentwrong.html",
        {"detail": exc.detail},
        status_code=exc.status_code,
    )
