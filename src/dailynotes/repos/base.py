"""Defines the API for accessing a user's collection of notes.

The most important class is :class:`Repo`.
"""

from typing import List, Optional

from dailynotes.models import CreateCmd, FileEditCmd, ScanResult


class Repo:
    """Base class for repos, which are responsible for reading and creating notes in a directory tree.

    Repo instances use :class:`dailynotes.accessors.base.Accessor` instances to read individual files,
    but add functionality that requires looking at more than one note (such as gathering to-dos).
    """
    def todos(self, path: Optional[str] = None) -> ScanResult:
        """Returns the open to-dos in every Markdown file under the given directory, recursively.

        If path is None, the repo's root directory is scanned. A path that does not exist or is not a
        directory produces an empty result rather than an error.

        Files that cannot be read are left out of the reports and listed in :attr:`ScanResult.skipped`.
        """
        raise NotImplementedError()

    def note_names(self, path: str) -> List[str]:
        """Returns the names (without the ``.md`` extension) of the Markdown files directly inside path.

        The list is sorted and contains no duplicates. A nonexistent directory gives an empty list.
        """
        raise NotImplementedError()

    def change(self, edits: List[FileEditCmd]) -> None:
        """Applies the specified edits. Changes are applied in order.

        May raise an IO-related exception. Changes are not applied atomically.
        """
        raise NotImplementedError()

    def close(self) -> None:
        """Release any resources associated with the repo. Should be called when you're done with an instance."""
        pass

    def create(self, path: str, contents: str = '') -> None:
        """Convenience method equivalent to calling change with one :class:`dailynotes.models.CreateCmd`"""
        self.change([CreateCmd(path, contents)])
