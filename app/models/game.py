from sqlalchemy import Column, String, Integer, DateTime
from datetime import datetime
import enum
from app.database import Base

class GameStatus(str, enum.Enum):
    AVAILABLE = "available"
    FULL = "full"

class GameMarrakech(Base):
    __tablename__ = "games_marrakech"

    id = Column(Integer, primary_key=True, index=True)

    # Créneau
    venue = Column(String, nullable=False)
    date = Column(String, nullable=False)    # "2026-02-09"
    time = Column(String, nullable=False)    # "21:30"
    match_type = Column(String, nullable=False)
    price = Column(Integer, nullable=False)

    status = Column(String, nullable=False, default=GameStatus.AVAILABLE.value)
    display_order = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=datetime.utcnow)


class GameToulouse(Base):
    __tablename__ = "games_toulouse"

    id = Column(Integer, primary_key=True, index=True)

    # Créneau
    venue = Column(String, nullable=False)
    date = Column(String, nullable=False)
    time = Column(String, nullable=False)
    match_type = Column(String, nullable=False)
    price = Column(Integer, nullable=False)
    duration = Column(String, nullable=True)

    status = Column(String, nullable=False, default=GameStatus.AVAILABLE.value)
    display_order = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=datetime.utcnow)
