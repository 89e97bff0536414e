from draft_league.data.league_data import (
    DRAFT_CAPITAL,
    SCHEDULE,
    TEAMS,
    get_team,
    get_team_color,
    get_team_draft_capital,
    get_teams_by_conference,
)


def test_fallback_league() -> None:
    assert len(TEAMS) == 8
    assert [g.id for g in SCHEDULE] == list(range(15))
    assert all(len(g.matchups) == 4 for g in SCHEDULE)
    assert {c.team for c in DRAFT_CAPITAL} == {t.name for t in TEAMS}


def test_every_team_plays_once_per_game_day() -> None:
    names = sorted(t.name for t in TEAMS)
    for game in SCHEDULE:
        playing = sorted(n for m in game.matchups for n in (m.home, m.away))
        assert playing == names, game.label


def test_team_lookups() -> None:
    assert get_team("Suns").abbrev == "PHX"
    assert get_team("Lakers") is None
    assert get_team_color("Thunder") == "#007AC1"
    assert get_team_color("Lakers") == "#888888"


def test_lookups_on_given_teams() -> None:
    suns = get_team("Suns").model_copy(update={"color": "#000000"})
    assert get_team_color("Suns", [suns]) == "#000000"
    assert get_team("Thunder", [suns]) is None


def test_teams_by_conference() -> None:
    east = get_teams_by_conference("East")
    assert [t.name for t in east] == ["Pacers", "Pistons", "76ers", "Raptors"]
    assert get_teams_by_conference("West", []) == []


def test_draft_capital() -> None:
    raptors = get_team_draft_capital("Raptors")
    assert [s.season for s in raptors.seasons][0] == "S2"
    first = raptors.seasons[0].picks[0]
    assert (first.round, first.origin) == ("1st", "Raptors")
    assert get_team_draft_capital("Lakers") is None
