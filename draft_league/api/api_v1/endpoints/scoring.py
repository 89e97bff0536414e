"""
Scoring API endpoint to serve the scoring rules to the frontend.
"""

from draft_league.core.config import settings
from fastapi import APIRouter
from realsports_sdk.client import DQ, FORFEIT

router = APIRouter()


@router.get("")
def get_scoring_config():
    """Get the current scoring rules."""
    return {
        "special_codes": {
            FORFEIT.upper(): "The forfeiting team loses; its opponent gets the win",
            DQ.upper(): "The disqualified team scores 0 for that matchup",
        },
        "batch_size": settings.SCORES_BATCH_SIZE,
        "adp": "Average leaderboard position across played game days; lower is better",
        "description": "Team score is the sum of its Real Sports lineup scores",
    }
