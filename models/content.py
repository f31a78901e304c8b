# models/content.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from models.tenant import MediaRef, BranchRef


class Quote(BaseModel):
    id: Optional[str] = None
    quote: str


class HomeInformation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    catch_phrase_1: Optional[str] = Field(None, alias="CatchPhrase1")
    catch_phrase_2: Optional[str] = Field(None, alias="CatchPhrase2")
    quotes: List[Quote] = Field(default_factory=list, alias="quote_s_")


class GalleryItem(BaseModel):
    id: str
    image: Optional[MediaRef] = None
    caption: Optional[str] = None
    branch: Optional[BranchRef] = None
