from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from draft_league.schemas.game import ComputedStandings, ScoredGame, Side, Winner
from draft_league.schemas.team import Team


class MatchupInput(BaseModel):
    """A matchup submitted for scoring. Accepts camelCase or snake_case keys."""

    model_config = ConfigDict(populate_by_name=True)

    game_label: str = Field("", alias="gameLabel")
    home: str
    away: str
    draft_id: int = Field(..., alias="draftId")
    home_draft_code: Optional[str] = Field(None, alias="homeDraftCode")
    away_draft_code: Optional[str] = Field(None, alias="awayDraftCode")


class ScoresRequest(BaseModel):
    matchups: Optional[List[MatchupInput]] = None


class MatchupResult(BaseModel):
    game_label: str
    home: str
    away: str
    home_score: Optional[float] = None
    away_score: Optional[float] = None
    winner: Optional[Winner] = None
    forfeit: Optional[Side] = None
    dq: Optional[Side] = None


class StandingsDelta(BaseModel):
    wins: int = 0
    losses: int = 0
    pf: float = 0
    pa: float = 0


class ScoresResponse(BaseModel):
    results: List[MatchupResult] = []
    standings: Dict[str, StandingsDelta] = {}


class LiveScores(BaseModel):
    """A season schedule scored against the Real Sports API."""

    schedule: List[ScoredGame] = []
    new_results: ComputedStandings = {}
    teams: List[Team] = []
