from pydantic import BaseModel


class PlayerScore(BaseModel):
    player: str
    team: str
    game_day: str
    score: float


class LeaderboardEntry(PlayerScore):
    position: int


class PlayerADP(BaseModel):
    player: str
    team: str
    games_played: int
    avg_score: float
    adp: float
