"""
app/routes/games.py
Catalogue des matchs par ville : lecture publique, écriture admin
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
import logging

from app.database import get_db
from app.dependencies import require_admin
from app.models import GameMarrakech, GameToulouse
from app.schemas.game import (
    GameMarrakechCreate, GameMarrakechUpdate, GameMarrakechResponse,
    GameToulouseCreate, GameToulouseUpdate, GameToulouseResponse,
    MoveRequest,
)

logger = logging.getLogger(__name__)


def list_games(db: Session, model):
    return db.query(model).order_by(
        model.display_order.asc(),
        model.created_at.desc(),
        model.id.desc(),
    ).all()


def update_game(db: Session, model, game_id: int, changes: dict):
    game = db.query(model).filter(model.id == game_id).first()
    if not game:
        return None
    columns = model.__table__.columns
    for field, value in changes.items():
        # null sur une colonne obligatoire : champ ignoré
        if value is None and not columns[field].nullable:
            continue
        setattr(game, field, value)
    db.commit()
    db.refresh(game)
    return game


def move_game(db: Session, model, game_id: int, direction: str):
    """Échange la position d'un match avec son voisin dans la liste affichée.

    Toute la liste est renumérotée selon sa position, puis les deux matchs
    échangent leur index, dans une seule transaction. Sans effet en bout de liste.
    """
    games = list_games(db, model)
    current_index = next((i for i, g in enumerate(games) if g.id == game_id), None)
    if current_index is None:
        return None

    new_index = current_index - 1 if direction == "up" else current_index + 1
    if new_index < 0 or new_index >= len(games):
        return games

    current_game = games[current_index]
    swap_game = games[new_index]
    try:
        # Renumérote toute la liste : les matchs créés à 0 gardent leur rang
        for i, g in enumerate(games):
            g.display_order = i
        current_game.display_order = new_index
        swap_game.display_order = current_index
        db.commit()
    except Exception:
        db.rollback()
        raise

    return list_games(db, model)


def build_games_router(model, create_schema, update_schema, response_schema, city: str) -> APIRouter:
    router = APIRouter()

    @router.get("", response_model=List[response_schema])
    def get_games(db: Session = Depends(get_db)):
        return list_games(db, model)

    @router.post("", response_model=response_schema, status_code=status.HTTP_201_CREATED)
    def create_game(data: create_schema, db: Session = Depends(get_db), _: str = Depends(require_admin)):
        game = model(**data.model_dump())
        db.add(game); db.commit(); db.refresh(game)
        logger.info(f"Match {city} #{game.id} créé ({game.venue} {game.date} {game.time})")
        return game

    @router.put("/{game_id}", response_model=response_schema)
    def edit_game(game_id: int, data: update_schema, db: Session = Depends(get_db), _: str = Depends(require_admin)):
        game = update_game(db, model, game_id, data.model_dump(exclude_unset=True))
        if not game:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")
        return game

    @router.delete("/{game_id}")
    def delete_game(game_id: int, db: Session = Depends(get_db), _: str = Depends(require_admin)):
        deleted = db.query(model).filter(model.id == game_id).delete()
        db.commit()
        if deleted:
            logger.info(f"Match {city} #{game_id} supprimé")
        return {"success": True}

    @router.post("/{game_id}/move", response_model=List[response_schema])
    def reorder_game(game_id: int, data: MoveRequest, db: Session = Depends(get_db), _: str = Depends(require_admin)):
        games = move_game(db, model, game_id, data.direction)
        if games is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")
        return games

    return router


marrakech_router = build_games_router(
    GameMarrakech, GameMarrakechCreate, GameMarrakechUpdate, GameMarrakechResponse, "marrakech"
)
toulouse_router = build_games_router(
    GameToulouse, GameToulouseCreate, GameToulouseUpdate, GameToulouseResponse, "toulouse"
)
