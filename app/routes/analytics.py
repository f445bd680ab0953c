"""
app/routes/analytics.py
Suivi des visites par page et tableau de bord de conversion
"""
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import Optional
import logging

from app.database import get_db
from app.models import Page, PageVisit, PAGE_LEAD_MODELS
from app.schemas.analytics import VisitCreate, PageStats, VALID_PAGES
from app.utils import geolocation

router = APIRouter()
logger = logging.getLogger(__name__)


def track_page_visit(
    db: Session,
    page: str,
    visitor_id: Optional[str] = None,
    city: Optional[str] = None,
    country: Optional[str] = None,
) -> PageVisit:
    visit = PageVisit(
        page=page,
        visitor_id=visitor_id or None,
        city=city or None,
        country=country or None,
    )
    db.add(visit); db.commit(); db.refresh(visit)
    return visit


def compute_page_stats(db: Session, page: str) -> dict:
    """Visites, visiteurs uniques, leads et taux de conversion d'une page.

    Les leads sont comptés sur toute la table associée à la page,
    pas seulement ceux issus des visites enregistrées.
    """
    visits = db.query(PageVisit.visitor_id, PageVisit.city).filter(PageVisit.page == page).all()

    unique_visitors = {v.visitor_id for v in visits if v.visitor_id}

    lead_model = PAGE_LEAD_MODELS[Page(page)]
    leads_count = db.query(func.count(lead_model.id)).scalar() or 0

    city_counts = {}
    for v in visits:
        city = v.city or "Unknown"
        city_counts[city] = city_counts.get(city, 0) + 1

    total_visits = len(visits)
    conversion_rate = (leads_count / total_visits) * 100 if total_visits > 0 else 0

    return {
        "total_visits": total_visits,
        "unique_visitors": len(unique_visitors),
        "leads_count": leads_count,
        "conversion_rate": round(conversion_rate, 2),
        "city_counts": city_counts,
    }


# ─── Tracking ────────────────────────────────────────────────────────────────

@router.post("/analytics/visit", status_code=status.HTTP_201_CREATED)
async def track_visit(data: VisitCreate, request: Request, db: Session = Depends(get_db)):
    client_ip = geolocation.get_client_ip(request)
    location = await geolocation.get_location_from_ip(client_ip)

    track_page_visit(db, data.page, data.visitor_id, location["city"], location["country"])
    return {"success": True}


# ─── Stats ───────────────────────────────────────────────────────────────────

@router.get("/stats/{page}", response_model=PageStats)
def get_page_stats(page: str, db: Session = Depends(get_db)):
    if page not in VALID_PAGES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid page")
    return compute_page_stats(db, page)
