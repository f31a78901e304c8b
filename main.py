from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from core.exceptions import http_exception_handler
from core.middleware import TenantRewriteMiddleware, ErrorBoundaryMiddleware
from core.templating import BASE_DIR
from db.graphql_client import GraphQLConnection
from settings.config import settings
from utils.logger import get_logger
from routes import api_routes, site_routes, tenant_routes

logger = get_logger("main")

app = FastAPI(title=settings.PROJECT_NAME, version="1.0.0")


@app.on_event("startup")
async def startup_event():
    # tests may install their own connection before startup
    if getattr(app.state, "content_api", None) is None:
        app.state.content_api = GraphQLConnection()
    logger.info(f"{settings.PROJECT_NAME} started, content backend: {app.state.content_api.endpoint}")


@app.on_event("shutdown")
async def shutdown_event():
    conn = getattr(app.state, "content_api", None)
    if conn is not None:
        await conn.close()
    app.state.content_api = None


# registered last = outermost: the error boundary wraps the rewrite
app.add_middleware(TenantRewriteMiddleware)
app.add_middleware(ErrorBoundaryMiddleware)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)

app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")
app.include_router(api_routes.router)
app.include_router(tenant_routes.router)
app.include_router(site_routes.router)
