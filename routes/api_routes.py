# routes/api_routes.py
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import RedirectResponse
from core.dependencies import get_content_api, get_subdomain
from db.graphql_client import GraphQLConnection
from services.page_service import seen_menu_cookie
from settings.config import settings
from utils.logger import get_logger

logger = get_logger("Api_Route")
router = APIRouter(prefix="/api", tags=["Api"])

SEEN_MENU_MAX_AGE = 60 * 60 * 24 * 365


@router.get("/health")
async def health_check():
    logger.info("Health check is successful")
    return {"status": "ok", "app": settings.PROJECT_NAME}


@router.get("/diagnostics")
async def diagnostics(request: Request, conn: GraphQLConnection = Depends(get_content_api)):
    """Configuration and backend connectivity, as seen from this process."""
    hostname = request.headers.get("host", "")
    result = {
        "api_url": settings.API_URL,
        "graphql_endpoint": conn.endpoint,
        "hostname": hostname,
        "subdomain": get_subdomain(request),
    }
    result.update(await conn.ping())
    return result


@router.get("/new-menu/{tenant_id}/seen")
async def mark_new_menu_seen(tenant_id: str, next: str = Query("/")):
    """Remember in the browser that the new-menu modal was dismissed for this tenant."""
    # only same-site relative targets
    target = next if next.startswith("/") and not next.startswith("//") else "/"
    response = RedirectResponse(url=target, status_code=303)
    response.set_cookie(seen_menu_cookie(tenant_id), "true", max_age=SEEN_MENU_MAX_AGE, samesite="lax")
    return response
