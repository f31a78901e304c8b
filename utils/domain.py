"""
Subdomain resolution and tenant URL helpers.

Examples:
  - "gold.localhost:3001"     -> "gold"
  - "localhost:3001"          -> None
  - "red-bistro.example.com"  -> "red-bistro"
  - "example.com"             -> None
  - "admin.example.com"       -> None (reserved)
  - "10.0.0.5:8000"           -> None
"""
import ipaddress
from typing import Iterable, Optional

from settings.config import settings

RESERVED_SUBDOMAINS = frozenset({"www", "admin"})
TENANT_PREFIX = "/tenant"


def _host_only(hostname: str) -> str:
    host = (hostname or "").strip().lower()
    if host.startswith("["):
        # bracketed IPv6 authority, e.g. [::1]:8000
        return host[1:].split("]", 1)[0]
    return host.split(":", 1)[0]


def _is_ip_address(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


def resolve_subdomain(hostname: str) -> Optional[str]:
    """
    Returns the tenant slug carried by the hostname, or None.
    Only the host component is inspected; a trailing :port is ignored.
    """
    host = _host_only(hostname)
    if not host or _is_ip_address(host):
        return None

    parts = host.split(".")
    subdomain = None
    if "localhost" in host:
        if len(parts) > 1:
            subdomain = parts[0]
    elif len(parts) > 2:
        subdomain = parts[0]

    if not subdomain or subdomain in RESERVED_SUBDOMAINS:
        return None
    return subdomain


def _is_under(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix.rstrip("/") + "/")


def is_excluded_path(path: str, excluded_prefixes: Optional[Iterable[str]] = None) -> bool:
    prefixes = settings.REWRITE_EXCLUDED_PREFIXES if excluded_prefixes is None else excluded_prefixes
    return any(_is_under(path, prefix) for prefix in prefixes)


def rewrite_path(hostname: str, path: str, excluded_prefixes: Optional[Iterable[str]] = None) -> str:
    """
    Maps a request path on a tenant host to the shared tenant route:
    "/" -> "/tenant/{slug}", "/menu" -> "/tenant/{slug}/menu".
    Excluded paths, hosts without a tenant and already rewritten paths pass through.
    """
    path = path or "/"
    if is_excluded_path(path, excluded_prefixes):
        return path

    subdomain = resolve_subdomain(hostname)
    if subdomain is None:
        return path

    tenant_root = f"{TENANT_PREFIX}/{subdomain}"
    if _is_under(path, tenant_root):
        return path
    if path == "/":
        return tenant_root
    return f"{tenant_root}{path}"


def get_base_domain(hostname: Optional[str]) -> str:
    if not hostname:
        return settings.DEFAULT_BASE_DOMAIN

    host = _host_only(hostname)
    if "localhost" in host:
        port = hostname.rsplit(":", 1)[1] if ":" in hostname else ""
        return f"localhost:{port or '3001'}"

    parts = host.split(".")
    if len(parts) >= 2:
        return ".".join(parts[-2:])
    return host


def tenant_url(slug: str, hostname: Optional[str] = None, scheme: str = "https") -> str:
    """Absolute URL of a tenant site, e.g. http://red-bistro.example.com"""
    if not hostname:
        return f"https://{slug}.{settings.DEFAULT_BASE_DOMAIN}"
    return f"{scheme}://{slug}.{get_base_domain(hostname)}"


def is_main_domain(hostname: str) -> bool:
    return resolve_subdomain(hostname) is None
