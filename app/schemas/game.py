from pydantic import Field
from typing import Optional, Literal
from datetime import datetime

from app.schemas import CamelModel
from app.models.game import GameStatus

class GameMarrakechCreate(CamelModel):
    venue: str = Field(min_length=1)
    date: str = Field(min_length=1)     # "2026-02-09"
    time: str = Field(min_length=1)     # "21:30"
    match_type: str = Field(min_length=1)
    price: int
    status: GameStatus = Field(default=GameStatus.AVAILABLE, validate_default=True)
    display_order: int = 0

class GameMarrakechUpdate(CamelModel):
    venue: Optional[str] = Field(default=None, min_length=1)
    date: Optional[str] = Field(default=None, min_length=1)
    time: Optional[str] = Field(default=None, min_length=1)
    match_type: Optional[str] = Field(default=None, min_length=1)
    price: Optional[int] = None
    status: Optional[GameStatus] = None
    display_order: Optional[int] = None

class GameMarrakechResponse(CamelModel):
    id: int
    venue: str
    date: str
    time: str
    match_type: str
    price: int
    status: str
    display_order: int
    created_at: Optional[datetime] = None

class GameToulouseCreate(GameMarrakechCreate):
    duration: Optional[str] = None   # "60 min" | "90 min"

class GameToulouseUpdate(GameMarrakechUpdate):
    duration: Optional[str] = None

class GameToulouseResponse(GameMarrakechResponse):
    duration: Optional[str] = None

class MoveRequest(CamelModel):
    direction: Literal["up", "down"]
