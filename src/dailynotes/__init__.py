"""Keeps daily and project notes as Markdown files, and gathers the to-dos scattered through them.

If you installed via ``pip``, run ``notes --help`` to get help.
Or, run ``python3 -m dailynotes --help``.

To use the Python API, look at :class:`dailynotes.api.Notes`
"""
