from draft_league.data.league_data import SCHEDULE, TEAMS
from draft_league.schemas.game import Game
from draft_league.schemas.season import SeasonConfig
from draft_league.schemas.team import Team
from draft_league.services.standings import (
    format_pct,
    get_draft_order,
    get_season_summary,
    get_standings,
    sort_standings,
)


def _team(name: str, wins: int, losses: int, conference: str = "West") -> Team:
    return Team(name=name, abbrev=name[:3].upper(), gm=f"@{name.lower()}", conference=conference, wins=wins, losses=losses)


def test_sort_by_pct_then_wins() -> None:
    teams = [_team("A", 1, 1), _team("B", 4, 1), _team("C", 2, 2), _team("D", 0, 0)]
    assert [t.name for t in sort_standings(teams)] == ["B", "C", "A", "D"]


def test_standings_by_conference() -> None:
    rows = get_standings(TEAMS, "East")

    assert {r.conference for r in rows} == {"East"}
    assert [r.rank for r in rows] == [1, 2, 3, 4]
    assert rows[0].pct_display == "0.800"
    assert rows[-1].team == "Raptors"


def test_pct_display_without_games() -> None:
    assert format_pct(_team("A", 0, 0)) == ".000"
    assert format_pct(_team("A", 2, 1)) == "0.667"


def test_draft_order_worst_record_first() -> None:
    teams = [_team("A", 4, 1), _team("B", 1, 4), _team("C", 0, 0), _team("D", 2, 2)]

    order = get_draft_order(teams)

    assert [e.team for e in order] == ["B", "C", "D", "A"]
    assert [e.pick for e in order] == [1, 2, 3, 4]
    # No games played counts as .500
    assert order[1].win_pct == 0.5


def test_draft_order_ties_broken_by_fewer_wins() -> None:
    order = get_draft_order([_team("A", 2, 2), _team("B", 1, 1)])
    assert [e.team for e in order] == ["B", "A"]


def test_season_summary() -> None:
    season = SeasonConfig(id=1, label="Season 1", locked=False)

    summary = get_season_summary(season, TEAMS, SCHEDULE)

    assert summary.team_count == 8
    assert summary.total_games == 14
    assert summary.played_games == 0
    assert summary.status == "Starting Soon"

    schedule = [g.model_copy(update={"played": g.id <= 3}) for g in SCHEDULE]
    summary = get_season_summary(season, TEAMS, schedule)

    # Preseason games are not counted
    assert summary.played_games == 3
    assert summary.status == "In Progress"


def test_season_summary_starting_soon() -> None:
    season = SeasonConfig(id=2, label="Season 2")
    schedule = [
        Game(id=0, label="Preseason Game 1", date="1/1", played=True),
        Game(id=1, label="Game 1", date="1/2"),
    ]

    summary = get_season_summary(season, [], schedule)

    assert (summary.total_games, summary.played_games) == (1, 0)
    assert summary.status == "Starting Soon"
