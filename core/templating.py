from pathlib import Path
from fastapi.templating import Jinja2Templates
from services.page_service import media_url
from settings.config import settings

BASE_DIR = Path(__file__).resolve().parent.parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

templates.env.globals["site_name"] = settings.SITE_NAME
templates.env.globals["api_url"] = settings.API_URL
templates.env.filters["media_url"] = media_url
