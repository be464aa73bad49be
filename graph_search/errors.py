# graph_search/errors.py
# Exceptions raised by the search layer. Running out of frontier is *not* one of
# them: an exhausted search is an ordinary failed SearchResult.
from __future__ import annotations


class SearchError(Exception):
    """Base class for graph_search errors."""


class EmptyFrontierError(SearchError, IndexError):
    """remove_next() was called without a preceding is_empty() check."""


class ConfigError(SearchError, ValueError):
    """A GRAPH_SEARCH_* setting could not be parsed."""


class UnknownProblemError(SearchError, KeyError):
    """No problem factory is registered under the requested name."""
