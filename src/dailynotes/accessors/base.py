"""Defines the API for reading to-dos from individual files.

The most important class is :class:`Accessor`.
"""

import os.path

from dailynotes.models import FileReport


class ParseError(Exception):
    """Raised when an :class:`Accessor` is unable to read or decode a file."""
    def __init__(self, message: str, path: str, cause: BaseException = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.cause = cause

    def __str__(self):
        return f'{self.message}: {self.path}'


class Accessor:
    """Base class for accessors, which are responsible for reading supported file types.

    Each instance is for working with a single file, specified to the constructor.

    .. attribute:: path
       :type: str
    """
    def __init__(self, path: str):
        self.path = path
        self._loaded = False

    def load(self) -> None:
        """Attempts to read the file. This does not normally need to be called explicitly.

        It will be called by :meth:`report` when necessary.

        May raise :exc:`ParseError`.
        """
        try:
            self._load()
        except Exception as e:
            self._loaded = False
            raise e
        self._loaded = True

    def report(self) -> FileReport:
        """Returns the open to-dos in the file.

        This will not necessarily reload the file from disk if the instance has previously loaded it.

        May raise :exc:`ParseError`.
        """
        if not self._loaded:
            self.load()
        return FileReport(os.path.basename(self.path), self.path, tuple(self._tasks()))

    def _load(self):
        """Subclasses should override this instead of :meth:`load`.

        The base class will then track whether load has been called, so that calls to :meth:`report`
        do not result in multiple loads."""
        raise NotImplementedError()

    def _tasks(self):
        """Subclasses should override this to return the file's open task lines, in order."""
        raise NotImplementedError()


class MiscAccessor(Accessor):
    """This accessor can be given the path to any file or folder, or even a nonexistent path.

    It never reads anything, and its reports never contain any tasks."""
    def _load(self) -> None:
        pass

    def _tasks(self):
        return []
