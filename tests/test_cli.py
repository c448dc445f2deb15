"""Tests for the streaming CLI."""

from __future__ import annotations

import json

import pytest

from pagedlist import cli
from pagedlist.pagination.errors import PageResolutionError
from pagedlist.transport.callable_resolver import MappingResolver


_PAGES = {
    "https://api.test/items": json.dumps({
        "data": [{"id": "1"}, {"id": "2"}],
        "meta": {"total": 3, "per_page": 2},
        "links": {"next": "https://api.test/items?page=2"},
    }),
    "https://api.test/items?page=2": json.dumps({"data": [{"id": "3"}]}),
}


class _StubResolver(MappingResolver):
    created: list[dict] = []

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(_PAGES)
        _StubResolver.created.append(kwargs)

    def close(self) -> None:
        pass


@pytest.fixture(autouse=True)
def _offline(monkeypatch, tmp_path):
    monkeypatch.setattr(_StubResolver, "created", [])
    monkeypatch.setattr(cli, "HttpPageResolver", _StubResolver)
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)


def test_streams_elements_as_json_lines(capsys):
    assert cli.main(["--url", "https://api.test/items"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert [json.loads(line)["id"] for line in lines] == ["1", "2", "3"]


def test_limit(capsys):
    assert cli.main(["--url", "https://api.test/items", "--limit", "2"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 2


def test_total_only(capsys):
    assert cli.main(["--url", "https://api.test/items", "--total-only"]) == 0
    assert capsys.readouterr().out.strip() == "total=3 per_page=2"


def test_failure_returns_nonzero(monkeypatch, capsys):
    def _raise(*args, **kwargs):
        raise PageResolutionError("network down")

    monkeypatch.setattr(cli, "fetch_paginated_list", _raise)
    assert cli.main(["--url", "https://api.test/items"]) == 1
    assert capsys.readouterr().out == ""


def test_resolver_joins_links_against_start_url():
    assert cli.main(["--url", "https://api.test/items", "--total-only"]) == 0
    assert _StubResolver.created[0]["base_url"] == "https://api.test/items"


def test_zero_limit_prints_nothing(capsys):
    assert cli.main(["--url", "https://api.test/items", "--limit", "0"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("limit", ["-1", "two"])
def test_invalid_limit_is_a_usage_error(limit, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--url", "https://api.test/items", "--limit", limit])

    assert excinfo.value.code == 2
    assert "--limit" in capsys.readouterr().err
    assert _StubResolver.created == []
