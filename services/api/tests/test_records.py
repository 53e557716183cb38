"""Unit tests for the CSV line parser."""

import pytest

from app.datastore import COLUMNS, FEATURE_COLUMNS, LABEL_COLUMN, ParseError, StatRecord, parse_record


def test_parse_well_formed_line(line) -> None:
    rec = parse_record(line())

    assert isinstance(rec, StatRecord)
    assert rec.games_played == 82
    assert rec.wins == 69
    assert rec.losses == 13
    assert rec.win_percentage == pytest.approx(0.841)
    assert rec.points == pytest.approx(103.1)
    assert rec.three_percentage == pytest.approx(0.373)
    assert rec.plus_minus == pytest.approx(10.8)
    assert isinstance(rec.games_played, int)
    assert isinstance(rec.minutes, float)


def test_parse_every_column_lands_in_its_field() -> None:
    values = [str(i) for i in range(len(COLUMNS))]
    rec = parse_record(",".join(values))

    for i, column in enumerate(COLUMNS):
        assert getattr(rec, column.attr) == column.type(i)


def test_parse_ignores_trailing_newline(line) -> None:
    assert parse_record(line() + "\r\n") == parse_record(line())


def test_header_line_rejected(header_line) -> None:
    with pytest.raises(ParseError, match="header"):
        parse_record(header_line)


@pytest.mark.parametrize("text", ["", "82", "82,50"])
def test_too_few_fields_rejected(text) -> None:
    with pytest.raises(ParseError):
        parse_record(text)


def test_missing_and_extra_columns_rejected(line) -> None:
    with pytest.raises(ParseError, match="columns"):
        parse_record(line().rsplit(",", 1)[0])
    with pytest.raises(ParseError, match="columns"):
        parse_record(line() + ",1.0")


@pytest.mark.parametrize(
    "overrides",
    [
        {"games_played": "eighty"},
        {"wins": "50.5"},
        {"win_percentage": "abc"},
        {"plus_minus": ""},
        {"points": "nan"},
        {"points": "inf"},
        {"plus_minus": "-inf"},
        {"minutes": "1e999"},
        {"wins": "5_0"},
        {"wins": " 50"},
        {"losses": "\u0661\u0663"},
        {"points": "1_03.1"},
    ],
)
def test_non_numeric_value_rejected(line, overrides) -> None:
    with pytest.raises(ParseError, match="cannot read"):
        parse_record(line(**overrides))


def test_parse_error_is_a_value_error(line) -> None:
    with pytest.raises(ValueError):
        parse_record(line(losses="x"))


def test_to_dict_uses_camel_case_keys(line) -> None:
    d = parse_record(line()).to_dict()

    assert list(d) == [c.json_name for c in COLUMNS]
    assert d["gamesPlayed"] == 82
    assert d["fieldGoalsAttempted"] == pytest.approx(85.0)
    assert d["personalFoulsAgainst"] == pytest.approx(20.3)


def test_features_exclude_counts_and_label(line) -> None:
    rec = parse_record(line())
    features = rec.features()

    assert len(features) == 22 == len(FEATURE_COLUMNS)
    assert features[0] == rec.minutes
    assert features[-1] == rec.plus_minus
    assert rec.label == rec.win_percentage
    assert LABEL_COLUMN not in FEATURE_COLUMNS


def test_schema_matches_record_fields() -> None:
    assert [c.attr for c in COLUMNS] == list(StatRecord.__dataclass_fields__)


@pytest.mark.parametrize("raw", ["+3.2", "-3.2", "3.", ".5", "1e2", "1.5E-1"])
def test_float_spellings_accepted(line, raw) -> None:
    assert parse_record(line(plus_minus=raw)).plus_minus == float(raw)
