from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session
import logging

from app.config import settings
from app.database import get_db
from app.models import TournamentRegistration, JoueurToulouse
from app.rate_limit import limiter
from app.schemas.registration import (
    TournamentRegistrationCreate, TournamentRegistrationResponse,
    JoueurToulouseCreate, JoueurToulouseResponse,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/tournament/register", response_model=TournamentRegistrationResponse,
             status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.FORM_RATE_LIMIT)
async def register_tournament(request: Request, data: TournamentRegistrationCreate, db: Session = Depends(get_db)):
    registration = TournamentRegistration(**data.model_dump())
    db.add(registration); db.commit(); db.refresh(registration)
    logger.info(f"Inscription tournoi #{registration.id} ({registration.team_size} joueurs)")
    return registration


@router.post("/joueur-toulouse", response_model=JoueurToulouseResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.FORM_RATE_LIMIT)
async def book_game_toulouse(request: Request, data: JoueurToulouseCreate, db: Session = Depends(get_db)):
    """Réserve des places sur un match de Toulouse (le gameId n'est pas vérifié)."""
    joueur = JoueurToulouse(**data.model_dump())
    db.add(joueur); db.commit(); db.refresh(joueur)
    logger.info(f"Réservation #{joueur.id} sur le match #{joueur.game_id}")
    return joueur
