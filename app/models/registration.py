from sqlalchemy import Column, String, Integer, DateTime
from datetime import datetime
from app.database import Base

class TournamentRegistration(Base):
    __tablename__ = "tournament_registrations"

    id         = Column(Integer, primary_key=True, index=True)
    name       = Column(String, nullable=False)
    phone      = Column(String, nullable=False)
    team_size  = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)


class JoueurToulouse(Base):
    __tablename__ = "joueur_toulouse"

    id = Column(Integer, primary_key=True, index=True)

    # Pas de ForeignKey : la réservation survit à la suppression du match
    game_id = Column(Integer, nullable=False, index=True)

    # Copie du créneau au moment de la réservation
    venue = Column(String, nullable=False)
    date = Column(String, nullable=False)
    time = Column(String, nullable=False)

    name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    number_of_persons = Column(Integer, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
