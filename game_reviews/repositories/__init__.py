"""
Repositories Package
Data access layer over the in-memory record collections
"""

from .base_repository import BaseRepository
from .record_store import RecordStore, GAMES, AUTHORS, REVIEWS

__all__ = [
    'BaseRepository',
    'RecordStore',
    'GAMES',
    'AUTHORS',
    'REVIEWS'
]
