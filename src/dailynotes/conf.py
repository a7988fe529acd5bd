from __future__ import annotations
from dataclasses import dataclass, replace
import os.path
from pathlib import Path
from typing import Callable, List

from dailynotes.editor import vscode_command

WEEKDAY_ABBREVS = ('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun')

DEFAULT_DAILY_TEMPLATE = "# ${weekday} ${day.isoformat()}\n\n"


@dataclass
class NotesConf:
    """Describes where notes live and how to open them.

    There is no configuration file; use :meth:`for_user` for the defaults, or construct an instance
    directly (which is mostly useful for tests and for scripting against another directory).
    """

    root_path: str
    """The notes directory. The ``todos`` command searches it recursively."""

    daily_dirname: str = 'daily'
    """Subdirectory of :attr:`root_path` holding daily notes, named like ``2020-06-01.md``."""

    projects_dirname: str = 'projects'
    """Subdirectory of :attr:`root_path` holding project notes, named like ``my-project.md``."""

    daily_template: str = DEFAULT_DAILY_TEMPLATE
    """Mako template used for the contents of a newly created daily note.

    The date of the note is available in the template namespace as ``day`` (a :class:`datetime.date`), and its
    English weekday abbreviation as ``weekday``, which unlike ``strftime('%a')`` does not depend on the locale.
    The default produces a header like ``# Mon 2020-06-01`` followed by a blank line.
    """

    editor_command: Callable[[str], List[str]] = vscode_command
    """Returns the command line used to open the given note path in an editor."""

    @classmethod
    def for_user(cls) -> NotesConf:
        """Returns the default configuration, with notes stored in ``~/Documents/notes``.

        Raises :exc:`dailynotes.api.Error` if the home directory cannot be determined.
        """
        from dailynotes.api import Error
        try:
            home = Path.home()
        except (KeyError, RuntimeError) as e:
            raise Error('Failed to get home directory') from e
        return cls(root_path=str(home.joinpath('Documents', 'notes')))

    @property
    def daily_path(self) -> str:
        return os.path.join(self.root_path, self.daily_dirname)

    @property
    def projects_path(self) -> str:
        return os.path.join(self.root_path, self.projects_dirname)

    def standardize(self):
        return replace(self, root_path=os.path.realpath(self.root_path))

    def instantiate(self):
        from dailynotes.api import Notes
        return Notes(self.standardize())
