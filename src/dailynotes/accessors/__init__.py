"""Support for reading to-dos from individual files.

:class:`dailynotes.accessors.base.Accessor` is the API that must be implemented to add support for a file type.
The other modules in this package provide implementations for specific file types.

"""
