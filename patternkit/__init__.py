"""Small concurrency and interface patterns: pools, runners, feed search, a JSON endpoint and more."""

__version__ = "0.1.0"