import pytest

from app.datastore import COLUMNS

# 1996-97 Chicago-style line: 82 games, 69-13
SAMPLE_VALUES = [
    "82", "69", "13", "0.841", "48.3", "103.1", "40.0", "85.0", "0.470", "6.7",
    "18.1", "0.373", "16.4", "23.0", "0.712", "14.5", "30.2", "44.7", "26.1", "13.0",
    "8.7", "4.0", "4.1", "19.4", "20.3", "10.8",
]

HEADER_LINE = "GP,W,L,WIN%,MIN,PTS,FGM,FGA,FG%,3PM,3PA,3P%,FTM,FTA,FT%,OREB,DREB,REB,AST,TOV,STL,BLK,BLKA,PF,PFD,+/-"


def make_line(**overrides) -> str:
    """Build a valid CSV line, overriding columns by record attribute name."""
    values = dict(zip((c.attr for c in COLUMNS), SAMPLE_VALUES))
    for attr, v in overrides.items():
        if attr not in values:
            raise KeyError(attr)
        values[attr] = str(v)
    return ",".join(values[c.attr] for c in COLUMNS)


@pytest.fixture
def line():
    return make_line


@pytest.fixture
def header_line() -> str:
    return HEADER_LINE


@pytest.fixture
def write_csv(tmp_path):
    """Write lines to `<tmp_path>/<name>` and return the path."""

    def _write(name: str, lines) -> str:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def season_lines(line, header_line):
    """Header plus `n` distinct team lines for one season."""

    def _lines(n: int):
        rows = [header_line]
        for i in range(n):
            wins = i % 83
            rows.append(
                line(
                    wins=wins,
                    losses=82 - wins,
                    win_percentage=f"{wins / 82:.3f}",
                    points=f"{90 + wins * 0.25:.1f}",
                    plus_minus=f"{(wins - 41) * 0.3:.1f}",
                )
            )
        return rows

    return _lines
