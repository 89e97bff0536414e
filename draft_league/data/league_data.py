"""
Built-in league data.

Used as-is when a season has no published sheet, and as the base that
sheet standings and rosters are merged onto.
"""

from typing import List, Optional

from draft_league.schemas.game import Game, Matchup
from draft_league.schemas.team import (
    Conference,
    DraftPick,
    SeasonPicks,
    Team,
    TeamDraftCapital,
)

UNKNOWN_TEAM_COLOR = "#888888"

# Canonical team metadata, always applied over sheet data
TEAM_COLORS = {
    "Suns": "#E56020",
    "Thunder": "#007AC1",
    "Warriors": "#1D428A",
    "Timberwolves": "#0C2340",
    "Pacers": "#002D62",
    "Pistons": "#C8102E",
    "76ers": "#006BB6",
    "Raptors": "#CE1141",
}

TEAM_ABBREVS = {
    "Suns": "PHX",
    "Thunder": "OKC",
    "Warriors": "GSW",
    "Timberwolves": "MIN",
    "Pacers": "IND",
    "Pistons": "DET",
    "76ers": "PHI",
    "Raptors": "TOR",
}

TEAM_CONFERENCES = {
    "Suns": "West",
    "Thunder": "West",
    "Warriors": "West",
    "Timberwolves": "West",
    "Pacers": "East",
    "Pistons": "East",
    "76ers": "East",
    "Raptors": "East",
}


def _team(name: str, gm: str, wins: int, losses: int, roster: List[str]) -> Team:
    return Team(
        name=name,
        abbrev=TEAM_ABBREVS[name],
        gm=gm,
        conference=TEAM_CONFERENCES[name],
        wins=wins,
        losses=losses,
        color=TEAM_COLORS[name],
        roster=roster,
    )


TEAMS: List[Team] = [
    # West
    _team("Suns", "@dbook", 4, 1, ["@jaxon", "@calebownsgb", "@victorosimhen", "@levandro", "@eaglesyanks", "@jdclapz17"]),
    _team("Thunder", "@frager", 1, 4, ["@et_phi", "@usa", "@j.b", "@jerzydrozdo21", "@osboti", "@mmf"]),
    _team("Warriors", "@ap", 2, 3, ["@tank", "@chipotlemexicangrill", "@jamski382", "@bignysportsfan", "@jakemccarthy"]),
    _team("Timberwolves", "@davison_0", 2, 3, ["@hankthetank4", "@elitrem", "@jakobe.walter", "@tage", "@burenjr"]),
    # East
    _team("Pacers", "@superduck", 4, 1, ["@imaginewinning", "@tadabrot", "@tj7_ynwa", "@timotimee", "@warren", "@keno1467"]),
    _team("Pistons", "@lotto12", 2, 3, ["@lecunningham", "@duolingo", "@wtephwurry", "@knicks_fan1"]),
    _team("76ers", "@shiraii", 4, 1, ["@lukatop2oat", "@bill", "@hayes23", "@drab101", "@iluvunderwood", "@togyk04"]),
    _team("Raptors", "@konnorgriffin.1", 1, 4, ["@windycitysportsfan", "@griff168", "@marvinalcantara_", "@ronin_", "@ok124", "@calebwilliams18"]),
]


def _game(game_id: int, label: str, date: str, sport: str, pairs: List[tuple]) -> Game:
    return Game(
        id=game_id,
        label=label,
        date=date,
        sport=sport,
        played=False,
        matchups=[Matchup(away=away, home=home) for away, home in pairs],
    )


SCHEDULE: List[Game] = [
    _game(0, "Preseason Game 1", "1/26", "NBA", [("Pistons", "Suns"), ("Timberwolves", "Raptors"), ("Thunder", "Pacers"), ("Warriors", "76ers")]),
    _game(1, "Game 1", "1/28", "NBA", [("Timberwolves", "Pistons"), ("Warriors", "Thunder"), ("Suns", "76ers"), ("Pacers", "Raptors")]),
    _game(2, "Game 2", "1/30", "NBA", [("Raptors", "Warriors"), ("Suns", "Timberwolves"), ("Pacers", "Thunder"), ("Pistons", "76ers")]),
    _game(3, "Game 3", "2/1", "NBA", [("Timberwolves", "76ers"), ("Pacers", "Warriors"), ("Raptors", "Thunder"), ("Pistons", "Suns")]),
    _game(4, "Game 4", "2/3", "NBA", [("Warriors", "76ers"), ("Pistons", "Raptors"), ("Thunder", "Timberwolves"), ("Pacers", "Suns")]),
    _game(5, "Game 5", "2/5", "NBA", [("76ers", "Pacers"), ("Timberwolves", "Warriors"), ("Raptors", "Pistons"), ("Suns", "Thunder")]),
    _game(6, "Game 6", "2/7", "NBA", [("Suns", "Raptors"), ("76ers", "Thunder"), ("Timberwolves", "Pacers"), ("Warriors", "Pistons")]),
    _game(7, "Game 7", "2/8", "NFL", [("Suns", "Warriors"), ("Pacers", "Pistons"), ("Timberwolves", "Raptors"), ("76ers", "Thunder")]),
    _game(8, "Game 8", "2/11", "NBA", [("Raptors", "Warriors"), ("Suns", "Timberwolves"), ("Pacers", "Thunder"), ("Pistons", "76ers")]),
    _game(9, "Game 9", "2/13", "NBA", [("Suns", "Raptors"), ("76ers", "Thunder"), ("Timberwolves", "Pacers"), ("Warriors", "Pistons")]),
    _game(10, "Game 10", "2/15", "NBA", [("Timberwolves", "Pistons"), ("Warriors", "Thunder"), ("Suns", "76ers"), ("Pacers", "Raptors")]),
    _game(11, "Game 11", "2/17", "CBB", [("Suns", "Warriors"), ("Pacers", "Pistons"), ("Timberwolves", "Raptors"), ("76ers", "Thunder")]),
    _game(12, "Game 12", "2/19", "NBA", [("Raptors", "Pacers"), ("Timberwolves", "Warriors"), ("Pistons", "Thunder"), ("76ers", "Suns")]),
    _game(13, "Game 13", "2/21", "NBA", [("Timberwolves", "76ers"), ("Pacers", "Warriors"), ("Raptors", "Thunder"), ("Pistons", "Suns")]),
    _game(14, "Game 14", "2/23", "NBA", [("Warriors", "76ers"), ("Pistons", "Raptors"), ("Thunder", "Timberwolves"), ("Pacers", "Suns")]),
]


def _picks(season: str, picks: List[tuple]) -> SeasonPicks:
    return SeasonPicks(
        season=season,
        picks=[DraftPick(round=round_, origin=origin) for round_, origin in picks],
    )


def _own_picks(team: str, rounds: int = 5) -> List[tuple]:
    ordinals = ["1st", "2nd", "3rd", "4th", "5th"]
    return [(ordinal, team) for ordinal in ordinals[:rounds]]


DRAFT_CAPITAL: List[TeamDraftCapital] = [
    TeamDraftCapital(
        team="Suns",
        seasons=[
            _picks("S2", [("1st", "Suns"), ("2nd", "Suns"), ("2nd", "Warriors"), ("3rd", "Suns"), ("3rd", "Warriors"), ("4th", "Suns")]),
            _picks("S3", _own_picks("Suns", 4)),
            _picks("S4", _own_picks("Suns")),
        ],
    ),
    TeamDraftCapital(
        team="Thunder",
        seasons=[
            _picks("S2", _own_picks("Thunder", 4) + [("5th", "Suns"), ("5th", "Thunder")]),
            _picks("S3", _own_picks("Thunder", 4) + [("5th", "Suns"), ("5th", "Thunder")]),
            _picks("S4", _own_picks("Thunder")),
        ],
    ),
    TeamDraftCapital(
        team="Timberwolves",
        seasons=[
            _picks("S2", [("3rd", "Timberwolves"), ("4th", "Timberwolves"), ("5th", "Timberwolves"), ("5th", "Raptors")]),
            _picks("S3", [("2nd", "Timberwolves"), ("4th", "Timberwolves"), ("5th", "Timberwolves")]),
            _picks("S4", _own_picks("Timberwolves")),
        ],
    ),
    TeamDraftCapital(
        team="Warriors",
        seasons=[
            _picks("S2", [("1st", "Warriors"), ("1st", "Timberwolves"), ("4th", "Warriors"), ("5th", "Warriors")]),
            _picks("S3", [("1st", "Warriors"), ("1st", "Timberwolves"), ("2nd", "Warriors"), ("3rd", "Warriors"), ("4th", "Warriors"), ("5th", "Warriors")]),
            _picks("S4", _own_picks("Warriors")),
        ],
    ),
    TeamDraftCapital(
        team="Raptors",
        seasons=[
            _picks("S2", [("1st", "Raptors"), ("2nd", "Timberwolves"), ("2nd", "Raptors"), ("3rd", "Raptors"), ("4th", "Raptors")]),
            _picks("S3", [("1st", "Raptors"), ("2nd", "Raptors"), ("3rd", "Timberwolves"), ("3rd", "Raptors"), ("4th", "Raptors"), ("5th", "Raptors")]),
            _picks("S4", _own_picks("Raptors")),
        ],
    ),
    TeamDraftCapital(
        team="76ers",
        seasons=[_picks(s, _own_picks("76ers")) for s in ("S2", "S3", "S4")],
    ),
    TeamDraftCapital(
        team="Pistons",
        seasons=[_picks(s, _own_picks("Pistons")) for s in ("S2", "S3", "S4")],
    ),
    TeamDraftCapital(
        team="Pacers",
        seasons=[_picks(s, _own_picks("Pacers")) for s in ("S2", "S3", "S4")],
    ),
]


def get_team(name: str, teams: Optional[List[Team]] = None) -> Optional[Team]:
    for team in teams if teams is not None else TEAMS:
        if team.name == name:
            return team
    return None


def get_team_color(name: str, teams: Optional[List[Team]] = None) -> str:
    team = get_team(name, teams)
    return team.color if team else UNKNOWN_TEAM_COLOR


def get_teams_by_conference(
    conference: Conference, teams: Optional[List[Team]] = None
) -> List[Team]:
    return [t for t in (teams if teams is not None else TEAMS) if t.conference == conference]


def get_team_draft_capital(name: str) -> Optional[TeamDraftCapital]:
    for capital in DRAFT_CAPITAL:
        if capital.team == name:
            return capital
    return None
