"""Tests for roster statistics functions."""

import pytest


def test_best_country_by_win_ratio(player_factory):
    """FR (2/3) beats US (1/3)."""
    from tennis_roster.services.statistics import best_country

    players = [
        player_factory(1, country="FR", last=[1, 0, 1]),
        player_factory(2, country="US", last=[0, 0, 1]),
    ]
    assert best_country(players) == "FR"


def test_best_country_pools_outcomes_across_players(player_factory):
    """Ratios are wins over total flags per country, not an average of player ratios."""
    from tennis_roster.services.statistics import best_country, win_ratios

    players = [
        player_factory(1, country="FR", last=[1, 1, 1, 1]),
        player_factory(2, country="FR", last=[0, 0, 0, 0, 0, 0]),
        player_factory(3, country="US", last=[1, 0]),
    ]
    assert win_ratios(players) == {"FR": 0.4, "US": 0.5}
    assert best_country(players) == "US"


def test_best_country_tie_goes_to_first_seen(player_factory):
    from tennis_roster.services.statistics import best_country

    fr = player_factory(1, country="FR", last=[1, 0])
    us = player_factory(2, country="US", last=[0, 1])

    assert best_country([fr, us]) == "FR"
    assert best_country([us, fr]) == "US"


def test_best_country_without_outcomes_has_zero_ratio(player_factory):
    from tennis_roster.services.statistics import best_country, win_ratios

    players = [
        player_factory(1, country="GER", last=[]),
        player_factory(2, country="ITA", last=[0]),
    ]
    assert win_ratios(players) == {"GER": 0.0, "ITA": 0.0}
    assert best_country(players) == "GER"


def test_best_country_empty_roster():
    from tennis_roster.services.statistics import best_country

    assert best_country([]) == "N/A"


def test_average_bmi(player_factory):
    """(80 / 1.8^2 + 90 / 1.9^2) / 2 = 24.8110..., rounded to 24.81."""
    from tennis_roster.services.statistics import average_bmi

    players = [
        player_factory(1, weight=80000, height=180),
        player_factory(2, weight=90000, height=190),
    ]
    assert average_bmi(players) == 24.81


def test_bmi_single_player(player_factory):
    from tennis_roster.services.statistics import bmi

    assert bmi(player_factory(1, weight=72000, height=180)) == pytest.approx(22.2222, abs=1e-4)


@pytest.mark.parametrize("height", [0, -170])
def test_average_bmi_rejects_non_positive_height(player_factory, height):
    from tennis_roster.exceptions import PlayerError, PlayerErrorType
    from tennis_roster.services.statistics import average_bmi

    players = [
        player_factory(1, height=180),
        player_factory(7, height=height),
    ]
    with pytest.raises(PlayerError) as exc_info:
        average_bmi(players)

    assert exc_info.value.error_type is PlayerErrorType.UPDATE_FAILED
    assert exc_info.value.player_id == 7
    assert "invalid height for BMI" in exc_info.value.message


def test_median_height_even_count(player_factory):
    from tennis_roster.services.statistics import median_height

    players = [player_factory(1, height=190), player_factory(2, height=180)]
    result = median_height(players)

    assert result == 185.0
    assert isinstance(result, float)


def test_median_height_even_count_fractional(player_factory):
    from tennis_roster.services.statistics import median_height

    players = [player_factory(i, height=h) for i, h in enumerate([185, 180, 196, 170], start=1)]
    assert median_height(players) == 182.5


def test_median_height_odd_count(player_factory):
    from tennis_roster.services.statistics import median_height

    players = [player_factory(i, height=h) for i, h in enumerate([198, 175, 185], start=1)]
    result = median_height(players)

    assert result == 185.0
    assert isinstance(result, float)
