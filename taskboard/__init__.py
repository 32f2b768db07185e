"""A SQLite-backed to-do board with undo/redo, reminders, recommendations and JSON export."""

__version__ = "0.1.0"