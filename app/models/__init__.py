from app.models.lead import LeadToulouse, LeadMarrakech
from app.models.registration import TournamentRegistration, JoueurToulouse
from app.models.game import GameStatus, GameMarrakech, GameToulouse
from app.models.visit import Page, PageVisit

# Table de leads associée à chaque page pour le taux de conversion
PAGE_LEAD_MODELS = {
    Page.TOULOUSE: LeadToulouse,
    Page.MARRAKECH: LeadMarrakech,
    Page.RAMADAN: TournamentRegistration,
}

# Catalogue de matchs par ville
GAME_MODELS = {
    "marrakech": GameMarrakech,
    "toulouse": GameToulouse,
}
