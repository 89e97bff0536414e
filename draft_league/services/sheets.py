"""
Google Sheets CSV fetcher.

Fetches the published Standings, Schedule and Rosters tabs of a season's
spreadsheet as CSV and parses them into league records, merging them
with the built-in fallback data.
"""

import asyncio
import logging
import math
import re
from typing import Dict, List, Optional

import httpx
from pydantic import BaseModel

from draft_league.core.config import settings
from draft_league.data.league_data import (
    SCHEDULE,
    TEAM_ABBREVS,
    TEAM_COLORS,
    TEAM_CONFERENCES,
    TEAMS,
)
from draft_league.schemas.game import Game, Matchup
from draft_league.schemas.season import SeasonConfig
from draft_league.schemas.team import Team
from realsports_sdk import parse_draft_code, parse_draft_id

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_WHITESPACE_RE = re.compile(r"\s+")


class SeasonData(BaseModel):
    teams: List[Team]
    schedule: List[Game]


def csv_url(base_url: str, gid: int) -> str:
    return f"{base_url}?gid={gid}&single=true&output=csv"


def parse_csv(text: str) -> List[List[str]]:
    """
    Parse CSV text into rows of trimmed cells.

    Blank lines are skipped and every line is its own record, so a quoted
    span never crosses lines. A double quote anywhere in a cell toggles
    quoting, and "" inside quotes is a literal quote.
    """
    rows = []
    for line in text.split("\n"):
        if not line.strip():
            continue
        cells = []
        current = ""
        in_quotes = False
        i = 0
        while i < len(line):
            ch = line[i]
            if ch == '"':
                if in_quotes and line[i + 1 : i + 2] == '"':
                    current += '"'
                    i += 1
                else:
                    in_quotes = not in_quotes
            elif ch == "," and not in_quotes:
                cells.append(current.strip())
                current = ""
            else:
                current += ch
            i += 1
        cells.append(current.strip())
        rows.append(cells)
    return rows


def _parse_int(value: str) -> int:
    """Integer prefix of a cell, 0 when there is none."""
    match = _LEADING_INT_RE.match(value or "")
    return int(match.group(1)) if match else 0


def _parse_number(value: str) -> Optional[float]:
    """A finite numeric cell as a float, None otherwise."""
    if not value or "_" in value:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _cell(row: List[str], idx: int) -> str:
    if idx < 0 or idx >= len(row):
        return ""
    return row[idx].strip()


def find_col(header: List[str], *variants: str) -> int:
    """Find a column index, trying each name variant in turn."""
    for variant in variants:
        if variant in header:
            return header.index(variant)
    return -1


# Standings tab
# Expected columns: Team, Wins, Losses


def parse_standings(text: str) -> Dict[str, Dict[str, int]]:
    rows = parse_csv(text)
    if len(rows) < 2:
        return {}

    header = [h.lower().strip() for h in rows[0]]
    team_idx = find_col(header, "team")
    wins_idx = find_col(header, "wins")
    losses_idx = find_col(header, "losses")
    if -1 in (team_idx, wins_idx, losses_idx):
        return {}

    result = {}
    for row in rows[1:]:
        team = _cell(row, team_idx)
        if team:
            result[team] = {
                "wins": _parse_int(_cell(row, wins_idx)),
                "losses": _parse_int(_cell(row, losses_idx)),
            }
    return result


# Schedule tab
# Expected columns: Date, GameID, HomeTeam, AwayTeam, HomeLink, AwayLink, Sport
# Optional columns: HomeScore, AwayScore, DraftID


def parse_schedule(text: str) -> List[Game]:
    rows = parse_csv(text)
    if len(rows) < 2:
        return []

    header = [_WHITESPACE_RE.sub("", h.lower().strip()) for h in rows[0]]
    date_idx = find_col(header, "date")
    game_id_idx = find_col(header, "gameid", "game", "gameday")
    home_idx = find_col(header, "hometeam", "home")
    away_idx = find_col(header, "awayteam", "away")
    home_link_idx = find_col(header, "homelink", "homedraft", "homedraftlink")
    away_link_idx = find_col(header, "awaylink", "awaydraft", "awaydraftlink")
    sport_idx = find_col(header, "sport")
    home_score_idx = find_col(header, "homescore")
    away_score_idx = find_col(header, "awayscore")
    draft_id_idx = find_col(header, "draftid", "contestid", "draft_id")

    logger.debug(
        f"Schedule columns: date={date_idx} game_id={game_id_idx} home={home_idx} "
        f"away={away_idx} home_link={home_link_idx} away_link={away_link_idx} "
        f"draft_id={draft_id_idx}"
    )
    if -1 in (date_idx, game_id_idx, home_idx, away_idx):
        return []

    # Group rows by GameID, keeping first-appearance order
    groups: Dict[str, Dict] = {}

    for row in rows[1:]:
        game_id = _cell(row, game_id_idx)
        home = _cell(row, home_idx)
        away = _cell(row, away_idx)
        if not game_id or not home or not away:
            continue

        raw_home_link = _cell(row, home_link_idx)
        raw_away_link = _cell(row, away_link_idx)

        if game_id not in groups:
            sport = _cell(row, sport_idx) if sport_idx >= 0 else "NBA"
            groups[game_id] = {
                "date": _cell(row, date_idx),
                "sport": sport or "NBA",
                "matchups": [],
            }

        matchup = Matchup(away=away, home=home)

        # DraftID column first, then the contest ID embedded in either link
        draft_id = (
            parse_draft_id(_cell(row, draft_id_idx))
            or parse_draft_id(raw_home_link)
            or parse_draft_id(raw_away_link)
        )
        if draft_id:
            matchup.draft_id = draft_id

        home_code = parse_draft_code(raw_home_link)
        away_code = parse_draft_code(raw_away_link)
        if home_code:
            matchup.home_draft_code = home_code
        if away_code:
            matchup.away_draft_code = away_code

        matchup.home_score = _parse_number(_cell(row, home_score_idx))
        matchup.away_score = _parse_number(_cell(row, away_score_idx))

        groups[game_id]["matchups"].append(matchup)

    games = []
    for idx, (label, data) in enumerate(groups.items()):
        played = any(
            m.home_score is not None and m.away_score is not None
            for m in data["matchups"]
        )
        games.append(
            Game(
                id=idx,
                label=label,
                date=data["date"],
                sport=data["sport"],
                matchups=data["matchups"],
                played=played,
            )
        )
    return games


# Rosters tab
# Expected columns: Team, GM, Player1, Player2, ... (every column after GM)


def parse_rosters(text: str) -> Dict[str, Dict]:
    rows = parse_csv(text)
    if len(rows) < 2:
        return {}

    header = [h.lower().strip() for h in rows[0]]
    team_idx = find_col(header, "team")
    gm_idx = find_col(header, "gm")
    if team_idx == -1 or gm_idx == -1:
        return {}

    result = {}
    for row in rows[1:]:
        team = _cell(row, team_idx)
        if not team:
            continue
        roster = [cell.strip() for cell in row[gm_idx + 1 :] if cell.strip()]
        result[team] = {"gm": _cell(row, gm_idx), "roster": roster}
    return result


async def safe_fetch_csv(client: httpx.AsyncClient, base_url: str, gid: int) -> str:
    """Fetch one tab as CSV text, returning '' on any error."""
    url = csv_url(base_url, gid)
    try:
        response = await client.get(url)
    except httpx.HTTPError as e:
        logger.warning(f"Sheet fetch failed for gid {gid}: {e}")
        return ""

    if not response.is_success:
        logger.warning(f"Sheet fetch failed for gid {gid}: {response.status_code}")
        return ""
    return response.text


def fallback_season_data() -> SeasonData:
    return SeasonData(
        teams=[t.model_copy(deep=True) for t in TEAMS],
        schedule=[g.model_copy(deep=True) for g in SCHEDULE],
    )


def merge_sheet_data(
    standings: Dict[str, Dict[str, int]],
    schedule: List[Game],
    rosters: Dict[str, Dict],
) -> SeasonData:
    """Merge parsed sheet tabs onto the fallback teams and schedule."""
    teams = []
    for team in TEAMS:
        standing = standings.get(team.name)
        roster_info = rosters.get(team.name)
        teams.append(
            team.model_copy(
                update={
                    "wins": standing["wins"] if standing else team.wins,
                    "losses": standing["losses"] if standing else team.losses,
                    "gm": roster_info["gm"] if roster_info else team.gm,
                    "roster": (
                        roster_info["roster"]
                        if roster_info and roster_info["roster"]
                        else list(team.roster)
                    ),
                    "color": TEAM_COLORS.get(team.name, team.color),
                    "abbrev": TEAM_ABBREVS.get(team.name, team.abbrev),
                    "conference": TEAM_CONFERENCES.get(team.name, team.conference),
                }
            )
        )

    if not schedule:
        schedule = [g.model_copy(deep=True) for g in SCHEDULE]

    return SeasonData(teams=teams, schedule=schedule)


async def fetch_season_data(
    config: SeasonConfig,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> SeasonData:
    """
    Get teams and schedule for a season.

    Args:
        config: The season to load
        timeout: Per-tab timeout in seconds, defaults to SHEETS_TIMEOUT
        transport: Optional httpx transport (used for testing)

    Returns:
        Sheet data merged onto the fallback data, or the fallback data
        alone when the season has no sheet configured
    """
    if not config.sheet_base_url:
        return fallback_season_data()

    timeout = settings.SHEETS_TIMEOUT if timeout is None else timeout
    async with httpx.AsyncClient(
        timeout=timeout, transport=transport, follow_redirects=True
    ) as client:
        standings_csv, schedule_csv, rosters_csv = await asyncio.gather(
            safe_fetch_csv(client, config.sheet_base_url, config.gids.standings),
            safe_fetch_csv(client, config.sheet_base_url, config.gids.schedule),
            safe_fetch_csv(client, config.sheet_base_url, config.gids.rosters),
        )

    standings = parse_standings(standings_csv) if standings_csv else {}
    rosters = parse_rosters(rosters_csv) if rosters_csv else {}
    schedule = parse_schedule(schedule_csv) if schedule_csv else []

    with_drafts = [g for g in schedule if any(m.draft_id for m in g.matchups)]
    logger.info(
        f"Loaded {config.label} sheet: {len(standings)} standings, "
        f"{len(schedule)} games ({len(with_drafts)} with drafts), {len(rosters)} rosters"
    )

    return merge_sheet_data(standings, schedule, rosters)
