from typing import Dict, List, Literal, Optional

from pydantic import BaseModel

Side = Literal["home", "away"]
Winner = Literal["home", "away", "tie"]


class Matchup(BaseModel):
    away: str
    home: str
    away_score: Optional[float] = None
    home_score: Optional[float] = None
    # Starters for each team (up to 5)
    away_starters: Optional[List[str]] = None
    home_starters: Optional[List[str]] = None
    # Draft links from the Real app, one per starter
    away_draft_links: Optional[List[str]] = None
    home_draft_links: Optional[List[str]] = None
    away_starter_scores: Optional[List[float]] = None
    home_starter_scores: Optional[List[float]] = None
    # Real Sports contest + per-user entry codes (or FORFEIT / DQ)
    draft_id: Optional[int] = None
    home_draft_code: Optional[str] = None
    away_draft_code: Optional[str] = None


class Game(BaseModel):
    id: int
    label: str
    date: str
    sport: str = "NBA"
    matchups: List[Matchup] = []
    played: bool = False

    @property
    def is_preseason(self) -> bool:
        return "preseason" in self.label.lower()


class ScoredMatchup(Matchup):
    home_total: Optional[float] = None
    away_total: Optional[float] = None
    winner: Optional[Winner] = None
    home_draft_fetched: bool = False
    away_draft_fetched: bool = False
    forfeit: Optional[Side] = None
    dq: Optional[Side] = None


class ScoredGame(Game):
    matchups: List[ScoredMatchup] = []


class TeamDelta(BaseModel):
    """Wins, losses and points accumulated from newly scored matchups."""

    wins: int = 0
    losses: int = 0
    points_for: float = 0
    points_against: float = 0


ComputedStandings = Dict[str, TeamDelta]
