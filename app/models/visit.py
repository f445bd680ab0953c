from sqlalchemy import Column, String, Integer, DateTime
from datetime import datetime
import enum
from app.database import Base

class Page(str, enum.Enum):
    TOULOUSE = "toulouse"
    MARRAKECH = "marrakech"
    RAMADAN = "ramadan"

class PageVisit(Base):
    __tablename__ = "page_visits"

    id         = Column(Integer, primary_key=True, index=True)
    page       = Column(String, nullable=False, index=True)
    visitor_id = Column(String, nullable=True)   # id aléatoire stocké dans le navigateur
    city       = Column(String, nullable=True)
    country    = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
