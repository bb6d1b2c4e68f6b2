"""Analysis tools for Beetle Invaders session logs."""

from .session_analyzer import (
    SessionAnalyzer,
    GameEvent,
    list_sessions,
    compare_sessions,
    EVENT_TYPES,
    EVENT_COLORS,
)

__all__ = [
    'SessionAnalyzer',
    'GameEvent',
    'list_sessions',
    'compare_sessions',
    'EVENT_TYPES',
    'EVENT_COLORS',
]
