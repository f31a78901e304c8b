from typing import Optional
import httpx
from settings.config import settings
from core.exceptions import ContentAPIError
from db.queries import PING
from utils.logger import get_logger

logger = get_logger("GRAPHQL_CLIENT")


class GraphQLConnection:
    """
    Single HTTP client for the content backend's GraphQL endpoint.
    Every call goes to the network, nothing is cached.
    """

    def __init__(self, endpoint: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.endpoint = endpoint or settings.GRAPHQL_ENDPOINT
        logger.info(f"Initializing GraphQL connection to {self.endpoint}")
        self.client = httpx.AsyncClient(
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

    async def execute(self, query: str, variables: Optional[dict] = None) -> dict:
        """
        POST {query, variables} and return the response's data block.
        Raises ContentAPIError on network, HTTP or GraphQL errors.
        """
        try:
            response = await self.client.post(
                self.endpoint,
                json={"query": query, "variables": variables or {}},
            )
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"[Network error]: {e}")
            raise ContentAPIError(str(e)) from e

        errors = payload.get("errors")
        if errors:
            for err in errors:
                logger.error(
                    f"[GraphQL error]: Message: {err.get('message')}, "
                    f"Location: {err.get('locations')}, Path: {err.get('path')}"
                )
            raise ContentAPIError(errors[0].get("message") or "GraphQL error", errors=errors)
        return payload.get("data") or {}

    async def ping(self) -> dict:
        """Connectivity check used by /api/diagnostics."""
        result = {"backend_reachable": False, "graphql_working": False, "error_message": ""}
        try:
            response = await self.client.post(self.endpoint, json={"query": PING})
        except httpx.HTTPError as e:
            logger.error(f"Backend unreachable: {e}")
            result["error_message"] = str(e)
            return result

        result["backend_reachable"] = True
        if response.is_success:
            try:
                result["graphql_working"] = bool(response.json().get("data"))
            except ValueError:
                result["error_message"] = "Response is not JSON"
        else:
            result["error_message"] = f"HTTP {response.status_code}: {response.reason_phrase}"
        return result

    async def close(self):
        await self.client.aclose()
        logger.info("GraphQL connection closed")
