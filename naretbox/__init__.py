"""Naretbox: clinical questionnaire scoring and appointment scheduling."""

__version__ = "1.0.0"
