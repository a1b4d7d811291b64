"""A small modal terminal text editor: editor state and a terminal front end."""

__version__ = "0.0.1"