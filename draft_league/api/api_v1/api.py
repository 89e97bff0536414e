from draft_league.api.api_v1.endpoints import draft, scores, scoring, seasons
from fastapi import APIRouter

api_router = APIRouter()

api_router.include_router(seasons.router, prefix="/seasons", tags=["seasons"])
api_router.include_router(draft.router, prefix="/draft", tags=["draft"])
api_router.include_router(scores.router, prefix="/scores", tags=["scores"])
api_router.include_router(scoring.router, prefix="/scoring", tags=["scoring"])
