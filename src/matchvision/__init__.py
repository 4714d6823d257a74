"""Scoreboard result processing for vision-extracted game screenshots."""

__version__ = "0.1.0"
