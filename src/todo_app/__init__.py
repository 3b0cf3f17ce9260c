"""Terminal to-do list: add, edit, complete, delete and filter tasks stored locally."""

__version__ = "0.1.0"
