"""End-to-end tests: fetch_paginated_list over JSON documents."""

from __future__ import annotations

import functools
import json

import pytest
import requests
from pydantic import BaseModel

from pagedlist import client

from pagedlist.client import fetch_paginated_list
from pagedlist.codec.json_decoder import JsonPageDecoder
from pagedlist.config.settings import DecoderSettings, ResolverSettings
from pagedlist.pagination.errors import PageDecodeError, PageResolutionError
from pagedlist.pagination.page import UNKNOWN
from pagedlist.transport.callable_resolver import MappingResolver


class Person(BaseModel):
    id: str
    name: str


def _page(names, next_link=None, meta=None) -> str:
    return json.dumps({
        "data": [
            {"type": "people", "id": str(i), "attributes": {"name": n}}
            for i, n in names
        ],
        "meta": meta or {},
        "links": {"next": next_link},
    })


@pytest.fixture
def people_pages() -> dict[str, str]:
    return {
        "/people": _page([(1, "Ada"), (2, "Alan")], "/people?page=2", meta={"per_page": 2}),
        "/people?page=2": _page([(3, "Grace")], "/people?page=3"),
        "/people?page=3": _page([(4, "Edsger")]),
    }


class _CountingResolver(MappingResolver):
    def __init__(self, pages) -> None:
        super().__init__(pages)
        self.calls: list[str] = []

    def resolve(self, locator: str) -> bytes:
        self.calls.append(locator)
        return super().resolve(locator)


def test_streams_every_page(people_pages):
    resolver = _CountingResolver(people_pages)
    people = fetch_paginated_list(
        "/people",
        Person,
        resolver=resolver,
        decoder=JsonPageDecoder(settings=DecoderSettings()),
    )

    assert resolver.calls == ["/people"]
    assert people.total() == UNKNOWN
    assert people.per_page() == 2
    assert [p.name for p in people] == ["Ada", "Alan", "Grace", "Edsger"]
    assert resolver.calls == ["/people", "/people?page=2", "/people?page=3"]
    assert people.get(2) == Person(id="3", name="Grace")
    assert people.last_index_of(Person(id="4", name="Edsger")) == 3


def test_first_page_resolution_failure():
    with pytest.raises(PageResolutionError):
        fetch_paginated_list("/nowhere", dict, resolver=MappingResolver({}), decoder=JsonPageDecoder())


def test_first_page_decode_failure():
    with pytest.raises(PageDecodeError):
        fetch_paginated_list(
            "/broken",
            dict,
            resolver=MappingResolver({"/broken": "<html>"}),
            decoder=JsonPageDecoder(),
        )


def test_mid_chain_failure_fails_whole_operation(people_pages):
    del people_pages["/people?page=3"]
    people = fetch_paginated_list("/people", Person, resolver=MappingResolver(people_pages))

    assert people.get(0).name == "Ada"
    with pytest.raises(PageResolutionError):
        people.size()
    with pytest.raises(PageResolutionError):
        people.to_array()


class _FakeResponse:
    def __init__(self, content: bytes) -> None:
        self.status_code = 200
        self.content = content


class _UrlSession:
    """Serves bodies by absolute URL and rejects schemeless URLs like requests does."""

    def __init__(self, bodies: dict[str, str]) -> None:
        self.headers: dict[str, str] = {}
        self._bodies = bodies
        self.requested: list[str] = []

    def get(self, url, timeout=None):
        self.requested.append(url)
        if not url.startswith("http"):
            raise requests.exceptions.MissingSchema(f"Invalid URL {url!r}")
        return _FakeResponse(self._bodies[url].encode())


def test_relative_next_links_resolve_against_first_page(monkeypatch):
    session = _UrlSession({
        "http://api.example/items": _page([(1, "Ada")], "/items?page=2"),
        "http://api.example/items?page=2": _page([(2, "Alan")], "?page=3"),
        "http://api.example/items?page=3": _page([(3, "Grace")]),
    })
    sleeps: list[float] = []
    monkeypatch.setattr(
        client,
        "HttpPageResolver",
        functools.partial(
            client.HttpPageResolver,
            session=session,
            settings=ResolverSettings(),
            sleep_func=sleeps.append,
        ),
    )

    people = fetch_paginated_list("http://api.example/items", Person)

    assert [p.name for p in people.stream()] == ["Ada", "Alan", "Grace"]
    assert session.requested == [
        "http://api.example/items",
        "http://api.example/items?page=2",
        "http://api.example/items?page=3",
    ]
    assert sleeps == []
