from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from app.schemas import CamelModel, require_min_length, NAME_REQUIRED, PHONE_REQUIRED

class ContactFields(CamelModel):
    name: str = Field(default="", validate_default=True)
    phone: str = Field(default="", validate_default=True)

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        return require_min_length(v, 2, NAME_REQUIRED)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v):
        return require_min_length(v, 8, PHONE_REQUIRED)

# Tournoi Ramadan
class TournamentRegistrationCreate(ContactFields):
    team_size: str = Field(min_length=1)   # "5" | "6" | "7"

class TournamentRegistrationResponse(TournamentRegistrationCreate):
    id: int
    created_at: Optional[datetime] = None

# Réservation d'un match à Toulouse
class JoueurToulouseCreate(ContactFields):
    game_id: int
    venue: str = Field(min_length=1)
    date: str = Field(min_length=1)
    time: str = Field(min_length=1)
    number_of_persons: int = Field(ge=1)

class JoueurToulouseResponse(JoueurToulouseCreate):
    id: int
    created_at: Optional[datetime] = None
