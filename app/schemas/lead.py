from pydantic import Field, field_validator, validate_email
from pydantic_core import PydanticCustomError
from typing import Optional, List
from datetime import datetime

from app.schemas import CamelModel, require_min_length, NAME_REQUIRED, PHONE_REQUIRED, EMAIL_INVALID

class LeadBase(CamelModel):
    name: str = Field(default="", validate_default=True)
    phone: str = Field(default="", validate_default=True)
    preferred_date: Optional[List[str]] = None
    preferred_time_slot: Optional[List[str]] = None
    match_type: Optional[List[str]] = None
    duration: Optional[List[str]] = None
    additional_players: Optional[str] = None
    level: Optional[str] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        return require_min_length(v, 2, NAME_REQUIRED)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v):
        return require_min_length(v, 8, PHONE_REQUIRED)

class LeadToulouseCreate(LeadBase):
    email: Optional[str] = None

class LeadMarrakechCreate(LeadBase):
    # Champ optionnel dans le formulaire : vide ou adresse valide
    email: Optional[str] = Field(default="", validate_default=True)
    preferred_pitch: Optional[str] = None

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        v = (v or "").strip()
        if not v:
            return ""
        try:
            validate_email(v)
        except PydanticCustomError:
            raise PydanticCustomError("email", EMAIL_INVALID)
        return v

class LeadToulouseResponse(LeadToulouseCreate):
    id: int
    created_at: Optional[datetime] = None

class LeadMarrakechResponse(LeadMarrakechCreate):
    id: int
    created_at: Optional[datetime] = None
