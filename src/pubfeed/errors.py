"""Exceptions that abort a pubfeed run."""


class PubfeedError(RuntimeError):
    """Raised when a run cannot proceed."""


class RosterError(PubfeedError):
    """The roster file is missing or malformed."""


class OutputError(PubfeedError):
    """The publications file could not be written."""


class QueryError(PubfeedError):
    """The literature API could not be reached or returned an unusable body."""
