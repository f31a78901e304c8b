# services/page_service.py
from enum import Enum
from typing import Dict, List, Optional
from models.content import GalleryItem
from models.tenant import MediaRef, Tenant
from settings.config import settings

FEATURED_GALLERY_SIZE = 6


class PageKind(str, Enum):
    HOME = "home"
    ABOUT = "about"
    MENU = "menu"
    GALLERY = "gallery"
    CONTACT = "contact"
    RESERVATION = "reservation"
    ERROR = "somethingwentwrong"


PAGE_PATHS: Dict[str, PageKind] = {
    "": PageKind.HOME,
    "home": PageKind.HOME,
    "about": PageKind.ABOUT,
    "menu": PageKind.MENU,
    "gallery": PageKind.GALLERY,
    "contact": PageKind.CONTACT,
    "reservation": PageKind.RESERVATION,
    "somethingwentwrong": PageKind.ERROR,
}


def select_page(sub_path: Optional[str]) -> Optional[PageKind]:
    """Exact match of the path below /tenant/{slug}; None means not found."""
    return PAGE_PATHS.get((sub_path or "").strip("/"))


def media_url(ref: Optional[MediaRef]) -> str:
    """Media is served by the content backend under /media/{filename}."""
    if ref is None:
        return ""
    if ref.filename:
        return f"{settings.API_URL}/media/{ref.filename}"
    if ref.url:
        return f"{settings.API_URL}{ref.url}"
    return ""


def menu_url(tenant: Tenant) -> Optional[str]:
    """None when the tenant has not uploaded a menu."""
    if tenant.menu is None or not tenant.menu.url:
        return None
    return media_url(tenant.menu)


def gallery_cards(items: List[GalleryItem]) -> List[dict]:
    cards = []
    for item in items:
        cards.append({
            "id": item.id,
            "src": media_url(item.image),
            "alt": item.caption or (item.image.alt if item.image else None) or "Gallery image",
            "branch": item.branch.name if item.branch and item.branch.name else "",
            "caption": item.caption or "",
        })
    return cards


def new_menu_images(tenant: Tenant) -> List[str]:
    return [media_url(image.src) for image in (tenant.new_menu or []) if image.src]


def seen_menu_cookie(tenant_id: str) -> str:
    return f"seen-menu-{tenant_id}"


def should_show_new_menu(tenant: Tenant, cookies: Dict[str, str]) -> bool:
    return bool(tenant.new_menu) and seen_menu_cookie(tenant.id) not in cookies


def preselect_branch(
    tenants: List[Tenant],
    branch: Optional[str] = None,
    tenant_slug: Optional[str] = None,
) -> str:
    """
    Branch name a form should start with: ?tenant=slug wins, then ?branch=Name,
    then the first tenant.
    """
    if tenant_slug:
        for tenant in tenants:
            if tenant.slug == tenant_slug:
                return tenant.name
    if branch and branch.strip():
        return branch.strip()
    return tenants[0].name if tenants else ""
