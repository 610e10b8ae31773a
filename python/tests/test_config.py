"""Query-string configuration: defaults, clamping and fallbacks."""

from __future__ import annotations

import logging

import pytest

from backend.config import PuzzleConfig, parse_query_string


def test_parse_query_string() -> None:
    assert parse_query_string("?width=4&height=3&start=") == {
        "width": "4",
        "height": "3",
        "start": "",
    }
    assert parse_query_string("width=4&width=5") == {"width": "5"}
    assert parse_query_string("") == {}


def test_defaults() -> None:
    config = PuzzleConfig.from_query({}, default_seed=99)
    assert config == PuzzleConfig(seed=99)
    assert (config.width, config.height) == (3, 3)
    assert config.size is None
    assert config.shuffle == 81
    assert config.start is None and config.goal is None


def test_shuffle_default_follows_board_size() -> None:
    config = PuzzleConfig.from_query({"width": "10", "height": "10"})
    assert config.shuffle == 10000
    config = PuzzleConfig.from_query({"width": "2", "height": "5"})
    assert config.shuffle == 100


@pytest.mark.parametrize(
    "key, raw, attr, expected",
    [
        ("width", "1", "width", 2),
        ("width", "50", "width", 10),
        ("height", "-3", "height", 2),
        ("size", "2", "size", 5),
        ("size", "500", "size", 200),
        ("size", "64", "size", 64),
        ("shuffle", "99999", "shuffle", 20000),
        ("shuffle", "-1", "shuffle", 0),
        ("spacing", "100", "spacing", 20),
        ("seed", " 17 ", "seed", 17),
    ],
)
def test_values_are_clamped(key: str, raw: str, attr: str, expected: int) -> None:
    assert getattr(PuzzleConfig.from_query({key: raw}), attr) == expected


@pytest.mark.parametrize(
    "key, expected",
    [("width", 3), ("height", 3), ("size", None), ("shuffle", 81), ("seed", 7)],
)
def test_unparsable_falls_back(
    caplog: pytest.LogCaptureFixture, key: str, expected: int | None
) -> None:
    with caplog.at_level(logging.WARNING, logger="backend.config"):
        config = PuzzleConfig.from_query({key: "lots"}, default_seed=7)
    assert getattr(config, key) == expected
    assert key in caplog.text


def test_sequences_pass_through() -> None:
    config = PuzzleConfig.from_query({"start": "2,1,3,", "goal": ""})
    assert config.start == "2,1,3,"
    assert config.goal == ""
