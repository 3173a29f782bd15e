import json
import logging
import uuid
from dataclasses import dataclass, field

import pytest

from patternkit.search import (
    DefaultMatcher,
    Feed,
    Result,
    display,
    match,
    register,
    retrieve_feeds,
    run,
)


@dataclass
class _FixedMatcher:
    results: list
    calls: list = field(default_factory=list)

    def search(self, feed, search_term):
        self.calls.append((feed, search_term))
        return list(self.results)


class _FailingMatcher:
    def search(self, feed, search_term):
        raise RuntimeError("feed is broken")


def _write_feeds(tmp_path, entries):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(entries), encoding="utf-8")
    return path


def test_retrieve_feeds_reads_fields(tmp_path):
    path = _write_feeds(
        tmp_path, [{"site": "npr", "link": "http://example.com/rss", "type": "rss"}]
    )
    assert retrieve_feeds(path) == [
        Feed(name="npr", uri="http://example.com/rss", type="rss")
    ]


def test_retrieve_feeds_null_is_empty(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("null", encoding="utf-8")
    assert retrieve_feeds(path) == []


def test_retrieve_feeds_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        retrieve_feeds(tmp_path / "absent.json")


def test_retrieve_feeds_rejects_non_list(tmp_path):
    path = tmp_path / "data.json"
    path.write_text('{"site": "x"}', encoding="utf-8")
    with pytest.raises(ValueError):
        retrieve_feeds(path)


def test_default_matcher_finds_nothing():
    assert DefaultMatcher().search(Feed(name="a"), "term") == []


def test_register_twice_is_an_error():
    with pytest.raises(ValueError, match="already registered"):
        register("default", DefaultMatcher())


def test_run_uses_registered_matcher(tmp_path):
    feed_type = f"test-{uuid.uuid4().hex}"
    expected = [Result("Title", "first"), Result("Description", "second")]
    matcher = _FixedMatcher(expected)
    register(feed_type, matcher)
    path = _write_feeds(
        tmp_path,
        [
            {"site": "one", "link": "http://example.com/1", "type": feed_type},
            {"site": "two", "link": "http://example.com/2", "type": feed_type},
        ],
    )
    results = run("term", path)
    assert sorted(results, key=repr) == sorted(expected * 2, key=repr)
    assert sorted(feed.name for feed, _ in matcher.calls) == ["one", "two"]
    assert {term for _, term in matcher.calls} == {"term"}


def test_run_unknown_type_falls_back_to_default(tmp_path):
    path = _write_feeds(
        tmp_path, [{"site": "x", "link": "http://example.com/x", "type": "no-such-type"}]
    )
    assert run("term", path) == []


def test_run_missing_data_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        run("term", tmp_path / "absent.json")


def test_match_returns_matcher_results():
    expected = [Result("Title", "hit")]
    assert match(_FixedMatcher(expected), Feed(), "hit") == expected


def test_match_logs_and_discards_errors(caplog):
    caplog.set_level(logging.INFO, logger="patternkit.search")
    assert match(_FailingMatcher(), Feed(), "term") == []
    assert "feed is broken" in caplog.text


def test_display_logs_each_result(caplog):
    caplog.set_level(logging.INFO, logger="patternkit.search")
    display([Result("Title", "hello"), Result("Description", "world")])
    assert "Title:\nhello" in caplog.text
    assert "Description:\nworld" in caplog.text