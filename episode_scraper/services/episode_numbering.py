from __future__ import annotations

import re
from typing import Optional, Sequence

from .types import Episode, RawEpisodeRow

_RANK_PATTERN = re.compile(r"[+-]?[0-9]+")
# Ranks outside a signed 32-bit integer are labels, not episode numbers.
_RANK_MIN = -(2**31)
_RANK_MAX = 2**31 - 1


def padding_width(row_count: int) -> int:
    """Digits used for episode numbers in a season with ``row_count`` rows."""
    return max(len(str(row_count)), 2)


def _parse_rank(rank: str) -> Optional[int]:
    if not _RANK_PATTERN.fullmatch(rank.strip()):
        return None
    value = int(rank)
    if not _RANK_MIN <= value <= _RANK_MAX:
        return None
    return value


def _format_number(number: int, width: int) -> str:
    # The sign does not count towards the padded digits: -1 -> "-01".
    sign = "-" if number < 0 else ""
    return sign + str(abs(number)).zfill(width)


def normalize_episodes(
    rows: Sequence[RawEpisodeRow], season_number: int, series_name: str
) -> list[Episode]:
    """Turn the raw rows of one season listing into numbered episodes.

    Listings do not always start counting at 1 (e.g. the numbering continues
    from the previous season), so the first numeric rank found fixes the
    offset that is subtracted from every numeric rank of the season. Rows
    with a non-numeric rank such as "Pilot", "Special" or "TV Movie" keep
    their label as episode and get no season.
    """
    width = padding_width(len(rows))
    offset: Optional[int] = None

    episodes: list[Episode] = []
    for row in rows:
        number = _parse_rank(row.rank)
        if number is None:
            episodes.append(Episode(series_name, None, row.rank, row.title))
            continue

        if offset is None:
            offset = number - 1

        episodes.append(
            Episode(
                series_name,
                str(season_number),
                _format_number(number - offset, width),
                row.title,
            )
        )

    return episodes
