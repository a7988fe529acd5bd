"""Provides the main entry point for using the library, :class:`Notes`"""

from __future__ import annotations
from datetime import date
import os
import os.path
from typing import List, Optional
from mako.template import Template
from dailynotes.conf import NotesConf, WEEKDAY_ABBREVS
from dailynotes.editor import run_editor
from dailynotes.models import DailyNoteReq, NoteReq, NoteReqIsh, ProjectNoteReq, ResolvedNote, ScanResult
from dailynotes.repos.direct import DirectRepo


class Error(Exception):
    """Raised for failures that should stop the program, such as being unable to create a note."""
    pass


class Notes:
    """Main entry point for working programmatically with your notes.

    Generally, you should get an instance using the :meth:`Notes.for_user` method. Call :meth:`close` when you're
    done with it, or else use it as a context manager.

    .. attribute:: conf
       :type: dailynotes.conf.NotesConf

    .. attribute:: repo
       :type: dailynotes.repos.base.Repo

    Here's an example of how to use this class. This would print how many open to-dos each daily note has.

    .. code-block:: python

       from dailynotes.api import Notes
       with Notes.for_user() as notes:
           for report in notes.repo.todos(notes.conf.daily_path).reports:
               print(report.name, report.count)
    """

    @staticmethod
    def for_user() -> Notes:
        """Creates an instance for the notes in ``~/Documents/notes``.

        Raises :exc:`Error` if the home directory cannot be determined.
        """
        return NotesConf.for_user().instantiate()

    def __init__(self, conf: NotesConf):
        self.conf = conf
        self.repo = DirectRepo(conf)

    def note_path(self, req: NoteReqIsh) -> str:
        """Returns the path where the requested note is stored, without creating anything.

        Daily notes are named after the date, like ``daily/2020-06-01.md``. Project notes use the project name
        as-is, like ``projects/my-project.md``.
        """
        req = NoteReq.parse(req)
        if isinstance(req, DailyNoteReq):
            day = req.day or date.today()
            return os.path.join(self.conf.daily_path, f'{day.isoformat()}.md')
        return os.path.join(self.conf.projects_path, f'{req.name}.md')

    def resolve(self, req: NoteReqIsh) -> ResolvedNote:
        """Finds the requested note, creating it if it doesn't exist yet.

        The daily or projects directory is created if necessary, but nothing below it: a project name
        containing a path separator fails unless that subdirectory already exists.

        An existing note is never modified, so calling this repeatedly (on the same day, for daily notes)
        returns the same path without writing anything.

        New daily notes are filled in using :attr:`NotesConf.daily_template`; new project notes are empty.

        Raises :exc:`Error` if the directory or file cannot be created.
        """
        req = NoteReq.parse(req)
        if isinstance(req, DailyNoteReq) and req.day is None:
            req = DailyNoteReq(date.today())
        path = self.note_path(req)

        notes_dir = self.conf.daily_path if isinstance(req, DailyNoteReq) else self.conf.projects_path
        try:
            os.makedirs(notes_dir, exist_ok=True)
        except OSError as e:
            raise Error(f'Failed to create directory: {notes_dir}') from e

        if os.path.exists(path):
            return ResolvedNote(path)

        contents = self.render_daily(req.day) if isinstance(req, DailyNoteReq) else ''
        try:
            self.repo.create(path, contents)
        except OSError as e:
            raise Error(f'Failed to create file: {path}') from e
        return ResolvedNote(path, created=True)

    def daily(self, day: Optional[date] = None) -> ResolvedNote:
        """Convenience method equivalent to calling :meth:`resolve` with a :class:`DailyNoteReq`"""
        return self.resolve(DailyNoteReq(day))

    def project(self, name: str) -> ResolvedNote:
        """Convenience method equivalent to calling :meth:`resolve` with a :class:`ProjectNoteReq`"""
        return self.resolve(ProjectNoteReq(name))

    def render_daily(self, day: date) -> str:
        """Returns the initial contents for the daily note of the given date."""
        return Template(self.conf.daily_template).render(day=day, weekday=WEEKDAY_ABBREVS[day.weekday()])

    def projects(self) -> List[str]:
        """Returns the names of existing project notes, sorted.

        Raises :exc:`Error` if the projects directory exists but cannot be listed.
        """
        path = self.conf.projects_path
        try:
            return self.repo.note_names(path)
        except OSError as e:
            raise Error(f'Failed to read directory: {path}') from e

    def todos(self) -> ScanResult:
        """Returns the open to-dos from every Markdown file in the notes directory."""
        return self.repo.todos()

    def open(self, path: str) -> int:
        """Opens the path in the configured editor and waits for the editor to exit.

        Returns the editor's exit status. Raises :exc:`Error` if the editor cannot be started.
        """
        try:
            return run_editor(self.conf.editor_command(path))
        except OSError as e:
            raise Error('Failed to open file with VS Code') from e

    def close(self):
        """Closes the associated repo and releases any other resources."""
        self.repo.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.repo.close()
