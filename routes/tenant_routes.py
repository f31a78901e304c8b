# routes/tenant_routes.py
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from core.dependencies import get_content_api
from core.exceptions import render_not_found
from core.templating import templates
from db.graphql_client import GraphQLConnection
from models.tenant import Tenant
from routes.form_views import render_contact, render_reservation, handle_contact_post, handle_reservation_post
from services.content_service import fetch_tenant_by_slug, fetch_gallery
from services.page_service import (
    PageKind,
    select_page,
    menu_url,
    gallery_cards,
    new_menu_images,
    should_show_new_menu,
    FEATURED_GALLERY_SIZE,
)
from utils.logger import get_logger

logger = get_logger("Tenant_Route")
router = APIRouter(prefix="/tenant", tags=["Tenant"])

# Requests on {slug}.domain arrive here after TenantRewriteMiddleware, e.g. /menu -> /tenant/{slug}/menu


async def render_home(request: Request, conn: GraphQLConnection, tenant: Tenant):
    items = await fetch_gallery(conn, tenant.id)
    return templates.TemplateResponse(request, "tenant_home.html", {
        "tenant": tenant,
        "gallery": gallery_cards(items[:FEATURED_GALLERY_SIZE]),
        "show_new_menu": should_show_new_menu(tenant, request.cookies),
        "new_menu_images": new_menu_images(tenant),
    })


async def render_about(request: Request, conn: GraphQLConnection, tenant: Tenant):
    return templates.TemplateResponse(request, "about.html", {"tenant": tenant})


async def render_menu(request: Request, conn: GraphQLConnection, tenant: Tenant):
    url = menu_url(tenant)
    if url is None:
        logger.info(f"Tenant {tenant.slug} has no menu uploaded")
    return templates.TemplateResponse(request, "menu.html", {"tenant": tenant, "menu_url": url})


async def render_gallery(request: Request, conn: GraphQLConnection, tenant: Tenant):
    items = await fetch_gallery(conn, tenant.id)
    return templates.TemplateResponse(request, "gallery.html", {"tenant": tenant, "gallery": gallery_cards(items)})


async def render_contact_page(request: Request, conn: GraphQLConnection, tenant: Tenant):
    return render_contact(request, [tenant], tenant.name, tenant)


async def render_reservation_page(request: Request, conn: GraphQLConnection, tenant: Tenant):
    return render_reservation(request, [tenant], tenant.name, tenant)


async def render_error(request: Request, conn: GraphQLConnection, tenant: Tenant):
    return templates.TemplateResponse(request, "somethingwentwrong.html", {"tenant": tenant})


PAGE_RENDERERS = {
    PageKind.HOME: render_home,
    PageKind.ABOUT: render_about,
    PageKind.MENU: render_menu,
    PageKind.GALLERY: render_gallery,
    PageKind.CONTACT: render_contact_page,
    PageKind.RESERVATION: render_reservation_page,
    PageKind.ERROR: render_error,
}


@router.post("/{tenant_slug}/contact", response_class=HTMLResponse)
async def tenant_contact_submit(
    request: Request,
    tenant_slug: str,
    name: str = Form(""),
    phone: str = Form(""),
    message: str = Form(""),
    conn: GraphQLConnection = Depends(get_content_api),
):
    tenant = await fetch_tenant_by_slug(conn, tenant_slug)
    if tenant is None:
        return render_not_found(request)
    form_data = {"name": name, "phone": phone, "message": message}
    return await handle_contact_post(request, conn, [tenant], form_data, tenant=tenant)


@router.post("/{tenant_slug}/reservation", response_class=HTMLResponse)
async def tenant_reservation_submit(
    request: Request,
    tenant_slug: str,
    name: str = Form(""),
    phone: str = Form(""),
    date: str = Form(""),
    time: str = Form(""),
    guests: str = Form("2"),
    notes: str = Form(""),
    conn: GraphQLConnection = Depends(get_content_api),
):
    tenant = await fetch_tenant_by_slug(conn, tenant_slug)
    if tenant is None:
        return render_not_found(request)
    form_data = {"name": name, "phone": phone, "date": date, "time": time, "guests": guests, "notes": notes}
    return await handle_reservation_post(request, conn, [tenant], form_data, tenant=tenant)


@router.get("/{tenant_slug}", response_class=HTMLResponse)
@router.get("/{tenant_slug}/{sub_path:path}", response_class=HTMLResponse)
async def tenant_page(
    request: Request,
    tenant_slug: str,
    sub_path: str = "",
    conn: GraphQLConnection = Depends(get_content_api),
):
    """
    Renders one tenant page. Unknown tenant or unknown sub-path -> 404 page.
    """
    tenant = await fetch_tenant_by_slug(conn, tenant_slug)
    if tenant is None:
        logger.warning(f"Unknown tenant: {tenant_slug}")
        return render_not_found(request)

    kind = select_page(sub_path)
    if kind is None:
        logger.info(f"Unknown page '{sub_path}' for tenant {tenant_slug}")
        return render_not_found(request)

    return await PAGE_RENDERERS[kind](request, conn, tenant)
