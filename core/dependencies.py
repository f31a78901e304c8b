from typing import Optional
from fastapi import Request
from db.graphql_client import GraphQLConnection
from utils.domain import resolve_subdomain
from utils.logger import get_logger

logger = get_logger("Dependencies")


def get_content_api(request: Request) -> GraphQLConnection:
    """The process-wide content backend client created at startup."""
    return request.app.state.content_api


def get_subdomain(request: Request) -> Optional[str]:
    """
    Tenant slug resolved by TenantRewriteMiddleware.
    Falls back to resolving the Host header when the middleware did not run.
    """
    if hasattr(request.state, "subdomain"):
        return request.state.subdomain
    logger.debug("Subdomain not on request state, resolving from host header")
    return resolve_subdomain(request.headers.get("host", ""))
