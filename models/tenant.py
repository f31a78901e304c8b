# models/tenant.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Dict


class MediaRef(BaseModel):
    url: Optional[str] = None
    filename: Optional[str] = None
    alt: Optional[str] = None


class NewMenuImage(BaseModel):
    id: Optional[str] = None
    src: Optional[MediaRef] = None


class Tenant(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    slug: str
    domain: Optional[str] = None
    menu: Optional[MediaRef] = None
    logo: Optional[MediaRef] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    hero_title: Optional[str] = Field(None, alias="heroTitle")
    hero_subtitle: Optional[str] = Field(None, alias="heroSubtitle")
    hero_description: Optional[str] = Field(None, alias="heroDescription")
    hero_image: Optional[MediaRef] = Field(None, alias="heroImage")
    short_about_title: Optional[str] = Field(None, alias="shortAboutTitle")
    short_about_text: Optional[str] = Field(None, alias="shortAboutText")
    # new_menu may come back as null from the CMS
    new_menu: Optional[List[NewMenuImage]] = Field(default_factory=list, alias="newMenu")
    social_links: Optional[Dict[str, str]] = Field(None, alias="socialLinks")


class BranchRef(BaseModel):
    id: str
    name: Optional[str] = None
    slug: Optional[str] = None
