"""Roster statistics: best country by win ratio, average BMI, median height.

All functions are pure over a sequence of players and assume the caller has
already rejected an empty roster where that matters.
"""

import statistics
from collections.abc import Sequence

from tennis_roster.exceptions import PlayerError
from tennis_roster.models.player import Player

NO_COUNTRY = "N/A"


def win_ratios(players: Sequence[Player]) -> dict[str, float]:
    """
    Win ratio per country code, in first-seen country order.

    A country whose players have no recorded outcomes has ratio 0.
    """
    totals: dict[str, list[int]] = {}
    for player in players:
        wins_total = totals.setdefault(player.country.code, [0, 0])
        wins_total[0] += player.data.wins()
        wins_total[1] += len(player.data.last)

    return {code: (wins / total if total > 0 else 0.0) for code, (wins, total) in totals.items()}


def best_country(players: Sequence[Player]) -> str:
    """
    Country code with the highest win ratio.

    Ties go to the country seen first in the order ``players`` is given;
    the service passes the rank-sorted roster. Returns ``"N/A"`` when
    there are no players.
    """
    best_code, best_ratio = NO_COUNTRY, None
    for code, ratio in win_ratios(players).items():
        if best_ratio is None or ratio > best_ratio:
            best_code, best_ratio = code, ratio
    return best_code


def bmi(player: Player) -> float:
    """
    Body-mass index of one player (weight in grams, height in centimeters).

    Raises:
        PlayerError: UpdateFailed for the player if the height is not positive.
    """
    weight_kg = player.data.weight / 1000.0
    height_m = player.data.height / 100.0
    if height_m <= 0:
        raise PlayerError.update_failed(player.id, "invalid height for BMI")
    return weight_kg / (height_m * height_m)


def average_bmi(players: Sequence[Player]) -> float:
    """Mean BMI over all players, rounded to 2 decimals (round-half-to-even)."""
    return round(statistics.fmean(bmi(p) for p in players), 2)


def median_height(players: Sequence[Player]) -> float:
    """Median height in centimeters; the mean of the two middle values for an even count."""
    return float(statistics.median(sorted(p.data.height for p in players)))
