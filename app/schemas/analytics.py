from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError
from typing import Optional, Dict

from app.schemas import CamelModel
from app.models.visit import Page

VALID_PAGES = {p.value for p in Page}

class VisitCreate(CamelModel):
    page: Optional[str] = Field(default=None, validate_default=True)
    visitor_id: Optional[str] = None

    @field_validator("page")
    @classmethod
    def check_page(cls, v):
        if v not in VALID_PAGES:
            raise PydanticCustomError("invalid_page", "Invalid page")
        return v

    @field_validator("visitor_id", mode="before")
    @classmethod
    def coerce_visitor_id(cls, v):
        # Id généré côté navigateur : accepté quel que soit son type JSON
        if v is None or isinstance(v, str):
            return v
        return str(v)

class PageStats(CamelModel):
    total_visits: int
    unique_visitors: int
    leads_count: int
    conversion_rate: float
    city_counts: Dict[str, int]
