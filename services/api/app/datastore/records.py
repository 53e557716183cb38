"""Per-season team statistic records and the CSV line parser.

Each CSV file holds one line per team for a season. The column layout is
fixed and described once, as data, by `COLUMNS`:

    GP, W, L, WIN%, MIN, PTS, FGM, FGA, FG%, 3PM, 3PA, 3P%, FTM, FTA, FT%,
    OREB, DREB, REB, AST, TOV, STL, BLK, BLKA, PF, PFD, +/-

The first three columns are integer counts, everything after is a float.
`parse_record` walks that schema generically instead of converting each
column by hand.
"""

import math
import re
from dataclasses import dataclass
from typing import NamedTuple

from .errors import ParseError

HEADER_LABEL = "GP"
MIN_FIELDS = 3

# plain ASCII decimal only: no underscores, spaces, nan or inf
INT_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_PATTERNS = {int: INT_PATTERN, float: FLOAT_PATTERN}


class Column(NamedTuple):
    """One CSV column: record attribute, JSON key, and target numeric type."""

    attr: str
    json_name: str
    type: type


COLUMNS = (
    Column("games_played", "gamesPlayed", int),
    Column("wins", "wins", int),
    Column("losses", "losses", int),
    Column("win_percentage", "winPercentage", float),
    Column("minutes", "minutes", float),
    Column("points", "points", float),
    Column("field_goals_made", "fieldGoalsMade", float),
    Column("field_goals_attempted", "fieldGoalsAttempted", float),
    Column("field_goal_percentage", "fieldGoalPercentage", float),
    Column("threes_made", "threesMade", float),
    Column("threes_attempted", "threesAttempted", float),
    Column("three_percentage", "threePercentage", float),
    Column("free_throws_made", "freeThrowsMade", float),
    Column("free_throws_attempted", "freeThrowsAttempted", float),
    Column("free_throw_percentage", "freeThrowPercentage", float),
    Column("offensive_rebounds", "offensiveRebounds", float),
    Column("defensive_rebounds", "defensiveRebounds", float),
    Column("rebounds", "rebounds", float),
    Column("assists", "assists", float),
    Column("turnovers", "turnovers", float),
    Column("steals", "steals", float),
    Column("blocks", "blocks", float),
    Column("blocks_against", "blocksAgainst", float),
    Column("personal_fouls", "personalFouls", float),
    Column("personal_fouls_against", "personalFoulsAgainst", float),
    Column("plus_minus", "plusMinus", float),
)

LABEL_COLUMN = COLUMNS[3]

# raw counts and the label are not model inputs
FEATURE_COLUMNS = COLUMNS[4:]


@dataclass(frozen=True)
class StatRecord:
    """One team's per-game averages for a season."""

    games_played: int
    wins: int
    losses: int
    win_percentage: float
    minutes: float
    points: float
    field_goals_made: float
    field_goals_attempted: float
    field_goal_percentage: float
    threes_made: float
    threes_attempted: float
    three_percentage: float
    free_throws_made: float
    free_throws_attempted: float
    free_throw_percentage: float
    offensive_rebounds: float
    defensive_rebounds: float
    rebounds: float
    assists: float
    turnovers: float
    steals: float
    blocks: float
    blocks_against: float
    personal_fouls: float
    personal_fouls_against: float
    plus_minus: float

    def features(self) -> list[float]:
        """Return the model input vector in `FEATURE_COLUMNS` order."""
        return [getattr(self, c.attr) for c in FEATURE_COLUMNS]

    @property
    def label(self) -> float:
        return getattr(self, LABEL_COLUMN.attr)

    def to_dict(self) -> dict:
        """Serialize with the camelCase keys exposed by the API."""
        return {c.json_name: getattr(self, c.attr) for c in COLUMNS}


def parse_record(line: str) -> StatRecord:
    """Parse one comma-separated line into a `StatRecord`.

    Args:
        line: Raw CSV text. A trailing newline or surrounding whitespace is ignored.

    Returns:
        StatRecord: Fully populated record.

    Raises:
        ParseError: If the line is a header row, has the wrong number of
            columns, or any column is not a valid number of its type.
    """
    fields = line.strip().split(",")
    if len(fields) < MIN_FIELDS:
        raise ParseError(f"expected at least {MIN_FIELDS} fields, got {len(fields)}")
    if fields[0].strip() == HEADER_LABEL:
        raise ParseError("header row")
    if len(fields) != len(COLUMNS):
        raise ParseError(f"expected {len(COLUMNS)} columns, got {len(fields)}")

    values = {}
    for column, raw in zip(COLUMNS, fields):
        if not _PATTERNS[column.type].fullmatch(raw):
            raise ParseError(
                f"cannot read {column.json_name!r}: {raw!r} is not a valid {column.type.__name__}"
            )
        value = column.type(raw)
        if column.type is float and not math.isfinite(value):
            raise ParseError(f"cannot read {column.json_name!r}: {raw!r} is out of range")
        values[column.attr] = value

    return StatRecord(**values)
