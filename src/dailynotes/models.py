"""Defines classes for representing scan results, note requests, and file creation requests.

The most important classes are :class:`ScanResult`, :class:`FileReport`, and :class:`NoteReq`.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional, Tuple, Union


class TaskState(Enum):
    """Classification of a single line of a Markdown file."""
    OPEN = 'open'
    COMPLETED = 'completed'
    NONE = 'none'


@dataclass(frozen=True)
class FileReport:
    """The open to-do lines found in one file.

    Instances are only created for files containing at least one open task.
    """

    name: str
    """Base name of the file, e.g. ``2020-06-01.md``."""

    path: str
    """Absolute path of the file."""

    tasks: Tuple[str, ...] = ()
    """Open task lines in the order they appear in the file, with surrounding whitespace removed."""

    @property
    def count(self) -> int:
        return len(self.tasks)

    def as_json(self) -> dict:
        """Returns a dict representing the instance, suitable for serializing as json."""
        return {
            'name': self.name,
            'path': self.path,
            'todos': list(self.tasks),
        }


@dataclass
class ScanResult:
    """Aggregated open to-dos for a directory tree.

    :attr:`reports` is in the order the files were visited, and :attr:`total` always equals the sum of
    the lengths of their task lists.
    """

    reports: List[FileReport] = field(default_factory=list)

    total: int = 0

    skipped: List[Exception] = field(default_factory=list)
    """Errors for Markdown files that could not be read. These files contribute nothing to the result."""

    def as_json(self) -> dict:
        return {
            'files': [r.as_json() for r in self.reports],
            'total': self.total,
        }


@dataclass
class NoteReq:
    """Base class for requests to resolve a note.

    Use :meth:`parse` to build one from a string like ``daily`` or ``project:my-project``.
    """

    @classmethod
    def parse(cls, val: NoteReqIsh) -> NoteReq:
        """Converts the parameter to a NoteReq, if it isn't one already.

        ``daily`` gives a :class:`DailyNoteReq` for today; ``project:NAME`` gives a :class:`ProjectNoteReq`.
        Everything after the first colon is used as the project name, unchanged.

        Raises :exc:`ValueError` for anything else.
        """
        if isinstance(val, NoteReq):
            return val
        if val == 'daily':
            return DailyNoteReq()
        kind, sep, name = val.partition(':')
        if kind == 'project' and sep and name:
            return ProjectNoteReq(name)
        raise ValueError(f'Invalid note request: {val}')


@dataclass
class DailyNoteReq(NoteReq):
    """Requests the daily note for a date."""

    day: Optional[date] = None
    """The date of the note. If None, the current local date is used."""


@dataclass
class ProjectNoteReq(NoteReq):
    """Requests the note for a project.

    The name is used as the filename verbatim; it is not checked for path separators or other
    characters that are unsafe in filenames.
    """

    name: str = ''


NoteReqIsh = Union[str, NoteReq]


@dataclass(frozen=True)
class ResolvedNote:
    """The result of resolving a note request."""

    path: str
    """Absolute path of the note file."""

    created: bool = False
    """True if the file did not exist and was created while resolving."""


@dataclass
class FileEditCmd:
    """Base class for requests to make changes to a file."""

    path: str
    """Path to the file that should be changed."""


@dataclass
class CreateCmd(FileEditCmd):
    """Represents a request to create a new file. The parent directory must already exist."""

    contents: str = ''
