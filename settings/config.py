import os
from pydantic_settings import BaseSettings
from typing import List
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    """Configuration settings for the application."""
    PROJECT_NAME: str = "Tenant Site"
    SITE_NAME: str = "ELEMENTA"
    # Base URL of the content backend, media files are served under {API_URL}/media/
    API_URL: str = os.getenv("API_URL", "http://localhost:3000")
    GRAPHQL_ENDPOINT: str = os.getenv("GRAPHQL_ENDPOINT", "http://localhost:3000/api/graphql")
    SITE_URL: str = "https://elementa-restaurant.com"
    DEFAULT_BASE_DOMAIN: str = "hehehihi.com"
    RESERVATION_TIMEZONE: str = "Asia/Ho_Chi_Minh"
    REWRITE_EXCLUDED_PREFIXES: List[str] = ["/api", "/static", "/favicon.ico", "/sitemap.xml", "/robots.txt"]
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
