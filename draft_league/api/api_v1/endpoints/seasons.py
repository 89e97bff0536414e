import logging
from typing import List, Optional

from draft_league.api.deps import get_real_sports_client, get_season, get_season_data
from draft_league.data.league_data import DRAFT_CAPITAL, get_team, get_team_draft_capital
from draft_league.data.seasons import get_season_config, get_seasons
from draft_league.schemas.game import Game
from draft_league.schemas.scores import LiveScores
from draft_league.schemas.scoring import LeaderboardEntry, PlayerADP
from draft_league.schemas.season import SeasonConfig, SeasonSummary
from draft_league.schemas.team import (
    Conference,
    DraftOrderEntry,
    StandingRow,
    Team,
    TeamDraftCapital,
)
from draft_league.services.leaderboard import get_game_day_leaderboard, get_player_adp
from draft_league.services.score_calculator import calculate_scores, merge_standings
from draft_league.services.sheets import SeasonData
from draft_league.services.standings import (
    get_draft_order,
    get_season_summary,
    get_standings,
)
from fastapi import APIRouter, Depends, HTTPException
from realsports_sdk import RealSportsClient

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[SeasonConfig])
def list_seasons():
    """Get all seasons, including locked ones."""
    return get_seasons()


@router.get("/{season_id}", response_model=SeasonConfig)
def get_season_info(season_id: int):
    season = get_season_config(season_id)
    if not season:
        raise HTTPException(status_code=404, detail="Season not found")
    return season


@router.get("/{season_id}/summary", response_model=SeasonSummary)
def get_summary(
    season: SeasonConfig = Depends(get_season),
    data: SeasonData = Depends(get_season_data),
):
    """Team count, game days and progress for the season header."""
    return get_season_summary(season, data.teams, data.schedule)


@router.get("/{season_id}/teams", response_model=List[Team])
def get_teams(data: SeasonData = Depends(get_season_data)):
    return data.teams


@router.get("/{season_id}/teams/{team_name}", response_model=Team)
def get_team_by_name(team_name: str, data: SeasonData = Depends(get_season_data)):
    team = get_team(team_name, data.teams)
    if not team:
        raise HTTPException(status_code=404, detail="Team not found")
    return team


@router.get("/{season_id}/standings", response_model=List[StandingRow])
def get_season_standings(
    conference: Optional[Conference] = None,
    data: SeasonData = Depends(get_season_data),
):
    """Standings sorted by win percentage, optionally for one conference."""
    return get_standings(data.teams, conference)


@router.get("/{season_id}/schedule", response_model=List[Game])
def get_schedule(data: SeasonData = Depends(get_season_data)):
    return data.schedule


@router.get("/{season_id}/draft-order", response_model=List[DraftOrderEntry])
def get_season_draft_order(data: SeasonData = Depends(get_season_data)):
    """Draft order, worst record first."""
    return get_draft_order(data.teams)


@router.get("/{season_id}/draft-capital", response_model=List[TeamDraftCapital])
def get_draft_capital(season: SeasonConfig = Depends(get_season)):
    return DRAFT_CAPITAL


@router.get("/{season_id}/draft-capital/{team_name}", response_model=TeamDraftCapital)
def get_team_capital(team_name: str, season: SeasonConfig = Depends(get_season)):
    capital = get_team_draft_capital(team_name)
    if not capital:
        raise HTTPException(status_code=404, detail="Team not found")
    return capital


@router.get(
    "/{season_id}/scoring/leaderboard/{game_day}",
    response_model=List[LeaderboardEntry],
)
def get_leaderboard(game_day: str, data: SeasonData = Depends(get_season_data)):
    """Player leaderboard for one game day."""
    return get_game_day_leaderboard(data.schedule, game_day)


@router.get("/{season_id}/scoring/adp", response_model=List[PlayerADP])
def get_adp(data: SeasonData = Depends(get_season_data)):
    """Average leaderboard position per player across played game days."""
    return get_player_adp(data.schedule)


@router.get("/{season_id}/live", response_model=LiveScores)
async def get_live_scores(
    data: SeasonData = Depends(get_season_data),
    client: RealSportsClient = Depends(get_real_sports_client),
):
    """
    Score the season's schedule against the Real Sports API.

    Returns the scored schedule, the results added by this scoring run and
    the standings with those results merged onto the sheet baseline.
    """
    scored_schedule, new_wins = await calculate_scores(data.schedule, client)
    return LiveScores(
        schedule=scored_schedule,
        new_results=new_wins,
        teams=merge_standings(data.teams, new_wins),
    )
