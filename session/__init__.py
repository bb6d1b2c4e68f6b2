"""Gameplay session recording."""

from .session_logger import SessionLogger
