"""Provides the :class:`DirectRepo` class."""

import os
import os.path
from typing import List, Optional

from dailynotes.accessors.base import ParseError
from dailynotes.accessors.delegating import DelegatingAccessor, is_markdown
from dailynotes.conf import NotesConf
from dailynotes.models import CreateCmd, FileEditCmd, ScanResult
from dailynotes.repos.base import Repo


class DirectRepo(Repo):
    """Accesses notes directly on the filesystem without any caching.

    Every call to :meth:`todos` walks the whole directory tree again.

    .. attribute:: conf
       :type: NotesConf
    """
    def __init__(self, conf: NotesConf):
        self.conf = conf
        self.accessor_factory = DelegatingAccessor

    def todos(self, path: Optional[str] = None) -> ScanResult:
        root = self.conf.root_path if path is None else os.path.abspath(path)
        result = ScanResult()
        if os.path.isdir(root):
            result.total = self._scan_dir(root, result)
        return result

    def _scan_dir(self, dirpath: str, result: ScanResult) -> int:
        """Adds reports for files under dirpath to result, and returns the number of open tasks found.

        Reports from subdirectories are added before the reports for files directly inside dirpath, and
        those stay together in the order they were listed.
        """
        try:
            with os.scandir(dirpath) as it:
                entries = list(it)
        except OSError:
            return 0

        total = 0
        own = []
        for entry in entries:
            try:
                if entry.is_symlink():
                    continue
                is_dir = entry.is_dir()
                is_file = entry.is_file()
            except OSError:
                continue

            if is_dir:
                total += self._scan_dir(entry.path, result)
            elif is_file:
                try:
                    report = self.accessor_factory(entry.path).report()
                except ParseError as e:
                    result.skipped.append(e)
                    continue
                if report.tasks:
                    own.append(report)
                total += report.count
        result.reports.extend(own)
        return total

    def note_names(self, path: str) -> List[str]:
        try:
            with os.scandir(path) as it:
                names = {os.path.splitext(entry.name)[0] for entry in it if is_markdown(entry.name)}
        except FileNotFoundError:
            return []
        return sorted(names)

    def change(self, edits: List[FileEditCmd]):
        for edit in edits:
            if isinstance(edit, CreateCmd):
                with open(edit.path, 'w', encoding='utf-8') as file:
                    file.write(edit.contents)
            else:
                raise ValueError(f'Unsupported edit: {edit}')
