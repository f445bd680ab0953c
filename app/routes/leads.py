from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session
import logging

from app.config import settings
from app.database import get_db
from app.models import LeadToulouse, LeadMarrakech
from app.rate_limit import limiter
from app.schemas.lead import (
    LeadToulouseCreate, LeadToulouseResponse,
    LeadMarrakechCreate, LeadMarrakechResponse,
)

router = APIRouter()
logger = logging.getLogger(__name__)

# Pas de dédoublonnage : une nouvelle soumission crée une nouvelle ligne

@router.post("/toulouse", response_model=LeadToulouseResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.FORM_RATE_LIMIT)
async def create_lead_toulouse(request: Request, data: LeadToulouseCreate, db: Session = Depends(get_db)):
    lead = LeadToulouse(**data.model_dump())
    db.add(lead); db.commit(); db.refresh(lead)
    logger.info(f"Lead Toulouse #{lead.id} créé")
    return lead

@router.post("/marrakech", response_model=LeadMarrakechResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.FORM_RATE_LIMIT)
async def create_lead_marrakech(request: Request, data: LeadMarrakechCreate, db: Session = Depends(get_db)):
    lead = LeadMarrakech(**data.model_dump())
    db.add(lead); db.commit(); db.refresh(lead)
    logger.info(f"Lead Marrakech #{lead.id} créé")
    return lead
