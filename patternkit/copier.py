"""Copy data in batches from a puller into a storer."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass, field
from typing import Protocol


@dataclass
class Data:
    """A single unit of data being copied."""

    line: str = ""


class PullError(Exception):
    """Raised when pulling data from a source fails."""


class Puller(Protocol):
    def pull(self) -> Data: ...


class Storer(Protocol):
    def store(self, data: Data) -> None: ...


class Xenia:
    """A system to pull data from; it ends or fails at random."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def pull(self) -> Data:
        """Return the next piece of data.

        Raises EOFError when no data is left and PullError on failure.
        """
        roll = self._rng.randrange(10)
        if roll in (1, 9):
            raise EOFError
        if roll == 5:
            raise PullError("Error reading data from Xenia")
        data = Data("Data")
        print("In:", data.line)
        return data


class Pillar:
    """A system to store data into."""

    def store(self, data: Data) -> None:
        print("Out:", data.line)


@dataclass
class System:
    """Wraps a puller and a storer together into a single system."""

    puller: Puller = field(default_factory=Xenia)
    storer: Storer = field(default_factory=Pillar)

    def pull(self) -> Data:
        return self.puller.pull()

    def store(self, data: Data) -> None:
        self.storer.store(data)


def copy(system: System, batch: int) -> int:
    """Pull data in batches and store it until the source is exhausted.

    Returns the number of items copied once the source signals its end with
    EOFError; any other error from pulling or storing is raised after the
    items already pulled in that batch have been stored.
    """
    if batch < 1:
        raise ValueError("batch must be at least 1")

    total = 0
    while True:
        items: list[Data] = []
        failure: Exception | None = None
        try:
            while len(items) < batch:
                items.append(system.pull())
        except Exception as exc:  # noqa: BLE001 - re-raised below
            failure = exc

        for item in items:
            system.store(item)
        total += len(items)

        if isinstance(failure, EOFError):
            return total
        if failure is not None:
            raise failure


def main(argv: list[str] | None = None) -> int:
    """Copy from a Xenia into a Pillar in batches of three."""
    try:
        copy(System(Xenia(), Pillar()), 3)
    except PullError as err:
        print(err)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))