"""
Server-side proxy for the Real Sports draft API.

Keeps the auth headers private on the server.
"""

import logging
import re
from typing import Optional

from draft_league.api.deps import get_real_sports_client
from fastapi import APIRouter, Depends, HTTPException, Query
from realsports_sdk import RealSportsClient, RealSportsClientError, RealSportsDraft

logger = logging.getLogger(__name__)
router = APIRouter()

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


@router.get("", response_model=RealSportsDraft)
async def get_draft(
    draft_id: Optional[str] = Query(None, alias="draftId"),
    code: Optional[str] = Query(None),
    client: RealSportsClient = Depends(get_real_sports_client),
):
    """GET /draft?draftId=1442&code=xnrW4GxJ"""
    if not draft_id or not code:
        raise HTTPException(status_code=400, detail="Missing draftId or code parameter")

    match = _LEADING_INT_RE.match(draft_id)
    if not match:
        raise HTTPException(status_code=400, detail="Invalid draftId")

    try:
        return await client.get_draft(int(match.group(1)), code)
    except RealSportsClientError as e:
        logger.error(f"Draft fetch failed for {draft_id}/{code}: {e}")
        raise HTTPException(status_code=502, detail="Failed to fetch draft data")
