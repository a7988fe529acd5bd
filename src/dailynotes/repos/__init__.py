"""Handles interaction with a collection of notes.

:class:`dailynotes.repos.base.Repo` defines an API, and :class:`dailynotes.repos.direct.DirectRepo`
implements it by reading the filesystem directly on every call.
"""
