# routes/site_routes.py
import asyncio
import random
from typing import Optional
from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import HTMLResponse
from core.dependencies import get_content_api
from core.templating import templates
from db.graphql_client import GraphQLConnection
from routes.form_views import render_contact, render_reservation, handle_contact_post, handle_reservation_post
from services.content_service import fetch_tenants, fetch_home_information, fetch_gallery
from services.page_service import gallery_cards, menu_url, preselect_branch
from settings.config import settings
from utils.domain import tenant_url
from utils.logger import get_logger

logger = get_logger("Site_Route")
router = APIRouter(tags=["Site"])

# Main-domain pages (no tenant subdomain)


@router.get("/", response_class=HTMLResponse)
async def landing(request: Request, conn: GraphQLConnection = Depends(get_content_api)):
    tenants, home_info = await asyncio.gather(fetch_tenants(conn), fetch_home_information(conn))
    host = request.headers.get("host")
    branches = [
        {"tenant": t, "url": tenant_url(t.slug, host, request.url.scheme)}
        for t in tenants
    ]
    addresses = [{"id": t.id, "address": t.address} for t in tenants if t.address]
    quotes = list(home_info.quotes) if home_info else []
    random.shuffle(quotes)
    return templates.TemplateResponse(request, "landing.html", {
        "branches": branches,
        "addresses": addresses,
        "home_info": home_info,
        "quotes": quotes,
    })


@router.get("/about", response_class=HTMLResponse)
async def about(request: Request):
    return templates.TemplateResponse(request, "about.html", {"tenant": None})


@router.get("/menu", response_class=HTMLResponse)
async def menu(request: Request, branch: Optional[str] = Query(None), conn: GraphQLConnection = Depends(get_content_api)):
    tenants = await fetch_tenants(conn)
    selected_name = preselect_branch(tenants, branch=branch)
    selected = next((t for t in tenants if t.name == selected_name), None)
    return templates.TemplateResponse(request, "menu.html", {
        "tenant": None,
        "tenants": tenants,
        "selected": selected,
        "menu_url": menu_url(selected) if selected else None,
    })


@router.get("/gallery", response_class=HTMLResponse)
async def gallery(request: Request, conn: GraphQLConnection = Depends(get_content_api)):
    items = await fetch_gallery(conn)
    return templates.TemplateResponse(request, "gallery.html", {"tenant": None, "gallery": gallery_cards(items)})


@router.get("/contact", response_class=HTMLResponse)
async def contact(
    request: Request,
    branch: Optional[str] = Query(None),
    tenant: Optional[str] = Query(None),
    conn: GraphQLConnection = Depends(get_content_api),
):
    tenants = await fetch_tenants(conn)
    return render_contact(request, tenants, preselect_branch(tenants, branch=branch, tenant_slug=tenant))


@router.post("/contact", response_class=HTMLResponse)
async def contact_submit(
    request: Request,
    name: str = Form(""),
    phone: str = Form(""),
    branch: str = Form(""),
    message: str = Form(""),
    conn: GraphQLConnection = Depends(get_content_api),
):
    tenants = await fetch_tenants(conn)
    form_data = {"name": name, "phone": phone, "branch": branch, "message": message}
    return await handle_contact_post(request, conn, tenants, form_data)


@router.get("/reservation", response_class=HTMLResponse)
async def reservation(
    request: Request,
    branch: Optional[str] = Query(None),
    tenant: Optional[str] = Query(None),
    conn: GraphQLConnection = Depends(get_content_api),
):
    tenants = await fetch_tenants(conn)
    return render_reservation(request, tenants, preselect_branch(tenants, branch=branch, tenant_slug=tenant))


@router.post("/reservation", response_class=HTMLResponse)
async def reservation_submit(
    request: Request,
    name: str = Form(""),
    phone: str = Form(""),
    branch: str = Form(""),
    date: str = Form(""),
    time: str = Form(""),
    guests: str = Form("2"),
    notes: str = Form(""),
    conn: GraphQLConnection = Depends(get_content_api),
):
    tenants = await fetch_tenants(conn)
    form_data = {
        "name": name,
        "phone": phone,
        "branch": branch,
        "date": date,
        "time": time,
        "guests": guests,
        "notes": notes,
    }
    return await handle_reservation_post(request, conn, tenants, form_data)


@router.get("/somethingwentwrong", response_class=HTMLResponse)
async def something_went_wrong(request: Request):
    return templates.TemplateResponse(request, "somethingwentwrong.html", {"tenant": None})


@router.get("/sitemap.xml")
async def sitemap(request: Request, conn: GraphQLConnection = Depends(get_content_api)):
    tenants = await fetch_tenants(conn)
    return templates.TemplateResponse(
        request,
        "sitemap.xml",
        {"base_url": settings.SITE_URL.rstrip("/"), "tenants": tenants},
        media_type="application/xml",
    )
