# src/stats19/shared/errors.py


class Stats19Error(Exception):
    """Base class for every error raised by this package."""


class InvalidYearError(Stats19Error, ValueError):
    """A requested year is non-numeric, out of range, or missing."""


class DirectoryNotFoundError(Stats19Error, FileNotFoundError):
    """The data directory does not exist."""


class NoFilesFoundError(Stats19Error, LookupError):
    """Nothing in the catalog or on disk matches the request."""


class NoMatchingTypeError(NoFilesFoundError):
    """The record type matches no catalog entry and no year was given."""


class EmptyResultError(NoFilesFoundError):
    """The final, de-duplicated set of file names is empty."""


class AmbiguousFileError(Stats19Error, LookupError):
    """Several files match and the caller asked not to choose between them."""
