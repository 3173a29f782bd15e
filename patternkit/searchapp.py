"""Command that searches the configured feeds for a fixed term."""

from __future__ import annotations

import logging
import sys

from patternkit import rss  # noqa: F401  - registers the rss matcher
from patternkit.search import DATA_FILE, run

log = logging.getLogger(__name__)

SEARCH_TERM = "president"


def main(argv: list[str] | None = None) -> int:
    """Search the feeds listed in the data file (first argument, if given)."""
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(stream=sys.stdout, level=logging.INFO, format="%(asctime)s %(message)s")
    data_file = args[0] if args else DATA_FILE
    try:
        run(SEARCH_TERM, data_file)
    except (OSError, ValueError) as err:
        log.error("%s", err)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())