from sqlalchemy import Column, String, Integer, DateTime, JSON
from datetime import datetime
from app.database import Base

class LeadToulouse(Base):
    __tablename__ = "leads_toulouse"

    id                  = Column(Integer, primary_key=True, index=True)
    name                = Column(String, nullable=False)
    email               = Column(String, nullable=True)
    phone               = Column(String, nullable=False)
    preferred_date      = Column(JSON, nullable=True)
    preferred_time_slot = Column(JSON, nullable=True)
    match_type          = Column(JSON, nullable=True)   # 5v5 | 7v7 | ...
    duration            = Column(JSON, nullable=True)
    additional_players  = Column(String, nullable=True)
    level               = Column(String, nullable=True)  # débutant | intermédiaire | avancé
    created_at          = Column(DateTime, default=datetime.utcnow)


class LeadMarrakech(Base):
    __tablename__ = "leads_marrakech"

    id                  = Column(Integer, primary_key=True, index=True)
    name                = Column(String, nullable=False)
    email               = Column(String, nullable=False, default="")
    phone               = Column(String, nullable=False)
    preferred_date      = Column(JSON, nullable=True)
    preferred_time_slot = Column(JSON, nullable=True)
    match_type          = Column(JSON, nullable=True)
    duration            = Column(JSON, nullable=True)
    additional_players  = Column(String, nullable=True)
    level               = Column(String, nullable=True)
    preferred_pitch     = Column(String, nullable=True)
    created_at          = Column(DateTime, default=datetime.utcnow)
