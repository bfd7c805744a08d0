"""
ToDoList backend: user accounts and per-user todo items over a JSON API.
"""
__version__ = "1.0.0"
