"""
Error types raised by gridroute.

All of them are caller-input errors raised before a search starts; a search
that simply finds no path is not an error.
"""


class SearchError(ValueError):
    """Base class for every input error raised by the search engines."""


class InvalidInputError(SearchError):
    """
    Source, start or goal is out of bounds or blocked, or an edge is invalid
    (negative weight, neighbour id outside the graph).
    """


class EmptyGraphError(SearchError):
    """Graph with zero nodes, or a grid with zero rows or zero columns."""


class InputFormatError(SearchError):
    """Raised by the text loaders when a map or edge list cannot be parsed."""
