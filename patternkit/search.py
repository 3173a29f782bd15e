"""Search a set of feeds concurrently with matchers chosen by feed type."""

from __future__ import annotations

import json
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Protocol

log = logging.getLogger(__name__)

DATA_FILE = "data/data.json"


@dataclass(frozen=True)
class Feed:
    """A feed to be searched."""

    name: str = ""
    uri: str = ""
    type: str = ""


@dataclass(frozen=True)
class Result:
    """One match found in a feed."""

    field: str
    content: str


class Matcher(Protocol):
    def search(self, feed: Feed, search_term: str) -> list[Result]: ...


_matchers: dict[str, Matcher] = {}


def register(feed_type: str, matcher: Matcher) -> None:
    """Register the matcher used for feeds of ``feed_type``."""
    if feed_type in _matchers:
        raise ValueError(f"{feed_type} Matcher already registered")
    log.info("Register %s matcher", feed_type)
    _matchers[feed_type] = matcher


class DefaultMatcher:
    """Matcher for feeds of unknown type; it never finds anything."""

    def search(self, feed: Feed, search_term: str) -> list[Result]:
        if not isinstance(search_term, str):
            raise TypeError("search term must be a string")
        return []


register("default", DefaultMatcher())


def retrieve_feeds(path: str | Path = DATA_FILE) -> list[Feed]:
    """Read the list of feeds from a JSON file."""
    with open(path, encoding="utf-8") as handle:
        entries = json.load(handle)
    if entries is None:
        return []
    if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
        raise ValueError("feed data must be a list of objects")
    return [
        Feed(
            name=entry.get("site", ""),
            uri=entry.get("link", ""),
            type=entry.get("type", ""),
        )
        for entry in entries
    ]


def match(matcher: Matcher, feed: Feed, search_term: str) -> list[Result]:
    """Search one feed, logging and discarding any failure."""
    try:
        return list(matcher.search(feed, search_term))
    except Exception as err:  # noqa: BLE001 - one bad feed must not stop the rest
        log.error("%s", err)
        return []


def display(results: Iterable[Result]) -> None:
    """Log each result."""
    for result in results:
        log.info("%s:\n%s\n", result.field, result.content)


def run(search_term: str, data_file: str | Path = DATA_FILE) -> list[Result]:
    """Search every feed in ``data_file`` concurrently and return all results.

    Results are logged as each feed finishes.
    """
    feeds = retrieve_feeds(data_file)
    results: list[Result] = []
    with ThreadPoolExecutor(max_workers=max(1, len(feeds))) as executor:
        futures = [
            executor.submit(
                match, _matchers.get(feed.type, _matchers["default"]), feed, search_term
            )
            for feed in feeds
        ]
        for future in as_completed(futures):
            found = future.result()
            display(found)
            results.extend(found)
    return results