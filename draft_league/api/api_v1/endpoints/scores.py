import logging

from draft_league.api.deps import get_real_sports_client
from draft_league.schemas.scores import ScoresRequest, ScoresResponse
from draft_league.services.batch_scores import score_matchups
from fastapi import APIRouter, Depends, HTTPException
from realsports_sdk import RealSportsClient

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=ScoresResponse)
async def post_scores(
    request: ScoresRequest,
    client: RealSportsClient = Depends(get_real_sports_client),
):
    """
    Score a list of matchups.

    Each matchup's drafts are fetched from the Real Sports API and totaled;
    the response holds the per-matchup results and a standings delta
    (wins, losses, points for, points against) per team.
    """
    try:
        return await score_matchups(request.matchups or [], client)
    except Exception as e:
        logger.error(f"Score calculation failed: {e}")
        raise HTTPException(status_code=500, detail="Score calculation failed")
