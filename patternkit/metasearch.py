"""Query several simulated search engines at once, keeping all results or the first."""

from __future__ import annotations

import logging
import random
import sys
import time
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Callable, Protocol

log = logging.getLogger(__name__)

_DEMO_QUERY = "concurrency"


@dataclass(frozen=True)
class Result:
    """A search result returned by one engine."""

    engine: str
    title: str
    description: str
    link: str


class Searcher(Protocol):
    def search(self, term: str) -> list[Result]: ...


@dataclass
class SearchSession:
    """Options and searchers for one submission."""

    searchers: dict[str, Searcher] = field(default_factory=dict)
    first: bool = False


Option = Callable[[SearchSession], None]


def _pause(rng: random.Random, max_delay_ms: int) -> None:
    if max_delay_ms > 0:
        time.sleep(rng.randrange(max_delay_ms) / 1000)


@dataclass
class Google:
    """Simulated Google search."""

    max_delay_ms: int = 900
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def search(self, term: str) -> list[Result]:
        log.info("Google : Search : Started : search term[%s]", term)
        _pause(self.rng, self.max_delay_ms)
        results = [
            Result(
                engine="Google",
                title="The Go Programming Language",
                description="The Go Programming Language",
                link="https://go.example.com/",
            )
        ]
        log.info("Google : Search : Completed : Found[%d]", len(results))
        return results


@dataclass
class Bing:
    """Simulated Bing search."""

    max_delay_ms: int = 900
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def search(self, term: str) -> list[Result]:
        log.info("Bing : Search : Started : search term [%s]", term)
        _pause(self.rng, self.max_delay_ms)
        results = [
            Result(
                engine="Bing",
                title="A Tour of Go",
                description="Welcome to a tour of the Go programming language.",
                link="https://tour.example.com/",
            )
        ]
        log.info("Bing : Search : Completed : Found[%d]", len(results))
        return results


@dataclass
class Yahoo:
    """Simulated Yahoo search."""

    max_delay_ms: int = 900
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def search(self, term: str) -> list[Result]:
        log.info("Yahoo : Search : Started : search term [%s]", term)
        _pause(self.rng, self.max_delay_ms)
        results = [
            Result(
                engine="Yahoo",
                title="Go Playground",
                description="The Go Playground is a web service that runs on the project's servers",
                link="https://play.example.com/",
            )
        ]
        log.info("Yahoo : Search : Completed : Found[%d]", len(results))
        return results


def google(session: SearchSession) -> None:
    """Add Google to the session."""
    log.info("search : Submit : Info : Adding Google")
    session.searchers["google"] = Google()


def bing(session: SearchSession) -> None:
    """Add Bing to the session."""
    log.info("search : Submit : Info : Adding Bing")
    session.searchers["bing"] = Bing()


def yahoo(session: SearchSession) -> None:
    """Add Yahoo to the session."""
    log.info("search : Submit : Info : Adding Yahoo")
    session.searchers["yahoo"] = Yahoo()


def only_first(session: SearchSession) -> None:
    """Keep only the results of whichever searcher answers first."""
    session.first = True


def _log_discarded(future: Future) -> None:
    if future.cancelled() or future.exception() is not None:
        return
    log.info(
        "search : Submit : Info : Results Discarded : Results[%d]", len(future.result())
    )


def submit(query: str, *options: Option) -> list[Result]:
    """Run every selected searcher concurrently and collect their results."""
    session = SearchSession()
    for option in options:
        option(session)

    searchers = list(session.searchers.values())
    results: list[Result] = []
    if searchers:
        executor = ThreadPoolExecutor(max_workers=len(searchers))
        try:
            futures = [executor.submit(s.search, query) for s in searchers]
            log.info("search : Submit : Info : Waiting For Results...")
            for done in as_completed(futures):
                found = done.result()
                log.info("search : Submit : Info : Results Used : Results[%d]", len(found))
                results.extend(found)
                if session.first:
                    for other in futures:
                        if other is not done:
                            other.add_done_callback(_log_discarded)
                    break
        finally:
            executor.shutdown(wait=False)

    log.info("search : Submit : Completed : Found [%d] Results", len(results))
    return results


def main(argv: list[str] | None = None) -> int:
    """Run the demo query twice: keeping the first answer, then keeping all."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    for result in submit(_DEMO_QUERY, only_first, google, bing, yahoo):
        log.info("main : Results : Info : %s", result)

    for result in submit(_DEMO_QUERY, google, bing, yahoo):
        log.info("main : Results : Info : %s", result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))