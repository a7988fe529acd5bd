"""Provides the :class:`DelegatingAccessor` class."""

import os.path

from dailynotes.accessors.base import Accessor, MiscAccessor
from dailynotes.accessors.markdown import MarkdownAccessor
from dailynotes.models import FileReport


def is_markdown(path: str) -> bool:
    """True if the path's extension is exactly ``.md``.

    A file named just ``.md`` has no extension, and ``.MD`` is not matched.
    """
    return os.path.splitext(path)[1] == '.md'


class DelegatingAccessor(Accessor):
    """Responsible for choosing what :class:`dailynotes.accessors.base.Accessor` subclass to use for a given file.

    This selects an accessor based on the path's file extension, and delegates method calls to that accessor.

    Currently, the mapping is hardcoded:

    * ``.md`` -> :class:`MarkdownAccessor`
    * anything else -> :class:`MiscAccessor`
    """
    def __init__(self, path: str):
        super().__init__(path)
        if is_markdown(path):
            self.accessor = MarkdownAccessor(path)
        else:
            self.accessor = MiscAccessor(path)

    def load(self):
        self.accessor.load()

    def report(self) -> FileReport:
        return self.accessor.report()
