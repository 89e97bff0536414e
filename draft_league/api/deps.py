from draft_league.core.config import settings
from draft_league.data.seasons import get_season_config
from draft_league.schemas.season import SeasonConfig
from draft_league.services.sheets import SeasonData, fetch_season_data
from fastapi import Depends, HTTPException, status
from realsports_sdk import RealSportsClient


def get_real_sports_client() -> RealSportsClient:
    """Real Sports client using the server-side credentials."""
    return RealSportsClient(
        auth_info=settings.REAL_AUTH_INFO,
        device_uuid=settings.REAL_DEVICE_UUID,
        timeout=settings.REAL_TIMEOUT,
        base_url=settings.REAL_API_BASE_URL,
        version=settings.REAL_VERSION,
    )


def get_season(season_id: int) -> SeasonConfig:
    """Resolve a season, rejecting unknown and locked ones."""
    season = get_season_config(season_id)
    if not season:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Season not found")
    if season.locked:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Season is locked")
    return season


async def get_season_data(season: SeasonConfig = Depends(get_season)) -> SeasonData:
    return await fetch_season_data(season)
