from typing import List, Literal

from pydantic import BaseModel, Field

Conference = Literal["West", "East"]


class Team(BaseModel):
    name: str
    abbrev: str
    gm: str
    conference: Conference
    wins: int = 0
    losses: int = 0
    color: str = "#888888"
    roster: List[str] = []


class StandingRow(BaseModel):
    rank: int
    team: str
    abbrev: str
    conference: Conference
    gm: str
    wins: int
    losses: int
    pct: float
    pct_display: str  # '0.800', or '.000' with no games played


class DraftOrderEntry(BaseModel):
    pick: int
    team: str
    wins: int
    losses: int
    win_pct: float


class DraftPick(BaseModel):
    round: str  # '1st', '2nd', ...
    origin: str  # Team the pick originally belonged to


class SeasonPicks(BaseModel):
    season: str  # 'S2', 'S3', ...
    picks: List[DraftPick] = Field(default_factory=list)


class TeamDraftCapital(BaseModel):
    team: str
    seasons: List[SeasonPicks] = Field(default_factory=list)
