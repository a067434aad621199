"""Exceptions raised by the splitter and the joiner."""


class SplitJoinError(Exception):
    """
    Base class for split/join errors.
    """
    pass


class NotFoundError(SplitJoinError, FileNotFoundError):
    """
    Raised when the source path exists but is not a regular file.

    A source that does not exist at all surfaces the FileNotFoundError
    raised by os.stat, so catching FileNotFoundError covers both.
    """
    pass


class EmptyFileError(SplitJoinError, ValueError):
    """
    Raised when the source file has zero length.
    """
    pass


class InvalidInputError(SplitJoinError, ValueError):
    """
    Raised when a part count, chunk size or part list cannot produce a valid result.
    """
    pass
