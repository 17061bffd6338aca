"""Command modules for the zp CLI."""

from .match import query, suggest, top
from .settings import config_group

__all__ = [
    "query",
    "suggest",
    "top",
    "config_group",
]
