# patternkit

A collection of small, self-contained building blocks for concurrent and
decoupled programs, each with a runnable demonstration command. It uses
only the standard library.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | What it gives you |
| --- | --- |
| `patternkit.words` | `count_words(text)`: the number of whitespace-separated words in a string. |
| `patternkit.copier` | `copy(system, batch)`: moves `Data` records in batches from a puller to a storer combined in a `System` (by default a `Xenia` and a `Pillar`). It returns the number of items copied once the puller raises `EOFError`; a `PullError` from `Xenia`, or any other error, is raised after the items already pulled in that batch are stored. A `batch` below 1 raises `ValueError`. |
| `patternkit.pool` | `Pool(factory, size)`: a bounded pool of closable resources with `acquire()`, `release(resource)` and `close()`, usable as a context manager. `acquire()` hands out a pooled resource or makes a new one with `factory`; once the pool is closed and empty it raises `PoolClosedError`. Releasing into a full or closed pool closes the resource. A `size` of 0 or less raises `ValueError`. `create_connection()` makes `DbConnection` objects with increasing ids. |
| `patternkit.work` | `Pool(max_workers)`: a fixed set of worker threads. `run(worker)` hands over an object with a `task()` method and returns once a thread has taken it; `shutdown()` lets the threads finish their work and waits for them. Both raise `RuntimeError` after shutdown. `NamePrinter(name, delay)` is a sample task. |
| `patternkit.runner` | `Runner(timeout)`: runs tasks added with `add(*tasks)` in order, each called with its position. `start()` raises `RunnerTimeout` when the time limit (counted from creation) runs out, `RunnerInterrupt` after `interrupt()` or, in the main thread, a keyboard interrupt, and re-raises a task's own error. |
| `patternkit.search` | Feed search: `retrieve_feeds(path)` reads a JSON list of objects with `site`, `link` and `type` keys into `Feed` values; `register(feed_type, matcher)` (duplicates raise `ValueError`); `match(matcher, feed, search_term)` logs and discards a matcher's errors; `display(results)` logs results; `run(search_term, data_file)` searches every feed concurrently and returns all `Result` values. Feeds of an unregistered type use `DefaultMatcher`, which finds nothing. |
| `patternkit.rss` | `parse_document(data)` turns an RSS document into an `RssDocument` (with `Channel`, `Image` and `Item`), raising `ValueError` if it is not one. `RssMatcher` is registered for the `rss` feed type: it downloads the feed and matches a regular expression against item titles and descriptions. |
| `patternkit.searchapp` | `main(argv)`: searches the feeds in a data file for the term `president`, logging each result. |
| `patternkit.handlers` | A WSGI application from `make_app()` whose `/sendjson` route (`send_json`) answers with `{"Name":"Bill","Email":"bill@example.com"}`; other paths get a 404. |
| `patternkit.metasearch` | `submit(query, *options)`: queries the simulated engines chosen with `google`, `bing` and `yahoo` at once and returns their `Result` values; with `only_first` only the first answer is kept. |
| `patternkit.semaphore` | `Semaphore(size)` with `acquire(buffers)` and `release(buffers)`, and `ReaderWriter`, which allows at most `max_reads` simultaneous reads or one write. `start(name, max_reads, max_readers)` launches reader threads and a writer thread; `shutdown(*reader_writers)` stops them all. |

## Example

```python
from patternkit.words import count_words
from patternkit.pool import Pool, create_connection

print(count_words("the quick brown fox"))  # 4

with Pool(create_connection, 2) as pool:
    conn = pool.acquire()
    pool.release(conn)
```

## Commands

```
patternkit-wordcount FILE          # count the words in a text file
patternkit-copier                  # batch copy between a puller and a storer
patternkit-pool                    # share a pool of two simulated connections among 25 queries
patternkit-work                    # log names through a pool of two workers
patternkit-runner                  # run timed tasks under a three-second limit
patternkit-search [DATA_FILE]      # search the feeds in DATA_FILE (default data/data.json)
patternkit-serve                   # serve the JSON endpoint on port 4000
patternkit-metasearch              # query the simulated engines, first answer and then all
patternkit-semaphore               # readers and a writer sharing one resource for two seconds
```

`patternkit-runner` exits with status 1 on timeout and 2 on interrupt. The
other commands take no options.

## What it does not do

- No feed list is shipped: `patternkit-search` needs a JSON data file you
  supply, and only feeds of type `rss` are actually searched.
- The search engines in `patternkit.metasearch` are simulated; they return
  fixed results after a random delay and contact no real service.
- `patternkit-serve` is a single-route demonstration server built on
  `wsgiref`, not a production web server.