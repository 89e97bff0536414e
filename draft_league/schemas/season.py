from pydantic import BaseModel


class SheetGids(BaseModel):
    """Google Sheets tab GIDs for each data section."""

    standings: int = 0
    schedule: int = 0
    rosters: int = 0


class SeasonConfig(BaseModel):
    id: int
    label: str
    locked: bool = True
    description: str = ""
    # Published spreadsheet URL, everything before ?gid=
    sheet_base_url: str = ""
    gids: SheetGids = SheetGids()


class SeasonSummary(BaseModel):
    season_id: int
    label: str
    team_count: int
    total_games: int
    played_games: int
    status: str
