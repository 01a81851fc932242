"""
todo-desk: a local to-do list backend.

Tasks live in memory and are mirrored to a JSON snapshot file after every change.
"""

__version__ = "0.1.0"
