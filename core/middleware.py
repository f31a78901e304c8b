from fastapi import Request
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware
from core.templating import templates
from utils.domain import resolve_subdomain, rewrite_path
from utils.logger import get_logger

logger = get_logger("Middleware")

ERROR_PAGE_PATH = "/somethingwentwrong"


class TenantRewriteMiddleware(BaseHTTPMiddleware):
    """
    Routes tenant hosts to the shared /tenant/{slug} pages without a redirect:
    only the ASGI scope path changes, the client keeps seeing its own URL.
    """

    async def dispatch(self, request: Request, call_next):
        hostname = request.headers.get("host", "")
        path = request.scope["path"]
        request.state.subdomain = resolve_subdomain(hostname)
        request.state.original_path = path

        new_path = rewrite_path(hostname, path)
        if new_path != path:
            logger.debug(f"Rewriting {hostname}{path} -> {new_path}")
            request.scope["path"] = new_path
            request.scope["raw_path"] = new_path.encode("utf-8")
        return await call_next(request)


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):
    """Unhandled errors send the browser to the error page, once."""

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(f"Unhandled Exception on {path}: {str(e)}", exc_info=True)
            if "somethingwentwrong" in path:
                return templates.TemplateResponse(request, "somethingwentwrong.html", {}, status_code=500)
            return RedirectResponse(url=ERROR_PAGE_PATH, status_code=303)
