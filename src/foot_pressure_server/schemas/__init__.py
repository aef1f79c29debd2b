"""Pydantic schemas for API requests."""

from foot_pressure_server.schemas.history import HistoryQuery, parse_history_query

__all__ = [
    "HistoryQuery",
    "parse_history_query",
]
