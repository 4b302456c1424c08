"""Exercises in classes, files and sorted-sequence algorithms, with a contact book and a room reservation system."""

__version__ = "0.1.0"