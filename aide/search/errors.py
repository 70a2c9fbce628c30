"""Exceptions raised by the name-resolution engine."""


class SearchError(Exception):
    """Base class for name-resolution errors."""


class IndexCorruptionError(SearchError):
    """An index invariant does not hold.

    Raised for programming errors such as a document term missing from the
    vocabulary or a negative vector weight; never a user-facing condition.
    """
