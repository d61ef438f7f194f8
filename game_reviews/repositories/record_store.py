"""
Record Store
Owns the games, authors and reviews collections of a running service
"""

import copy
import itertools
import uuid
from typing import Dict, List, Optional

from .base_repository import BaseRepository
from . import seed_data

GAMES = 'games'
AUTHORS = 'authors'
REVIEWS = 'reviews'

ID_STRATEGIES = ('sequence', 'uuid')


class RecordStore(BaseRepository):
    """
    Repository holding the three record collections

    Provides:
    - List and point lookups for games, authors and reviews
    - Collision-free game id generation
    """

    def __init__(
        self,
        games: Optional[List[Dict]] = None,
        authors: Optional[List[Dict]] = None,
        reviews: Optional[List[Dict]] = None,
        id_strategy: str = 'sequence'
    ):
        """
        Initialize Record Store

        Args:
            games: Initial game records
            authors: Initial author records
            reviews: Initial review records
            id_strategy: Game id generator, 'sequence' or 'uuid'
        """
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"Unknown id strategy {id_strategy!r}, expected one of {ID_STRATEGIES}"
            )

        super().__init__({
            GAMES: games or [],
            AUTHORS: authors or [],
            REVIEWS: reviews or [],
        })
        self.id_strategy = id_strategy
        self._game_sequence = itertools.count(self._first_free_number(games or []))

    @classmethod
    def with_seed_data(cls, id_strategy: str = 'sequence') -> 'RecordStore':
        """Create a store populated with private copies of the seed records"""
        return cls(
            games=copy.deepcopy(seed_data.GAMES),
            authors=copy.deepcopy(seed_data.AUTHORS),
            reviews=copy.deepcopy(seed_data.REVIEWS),
            id_strategy=id_strategy
        )

    @staticmethod
    def _first_free_number(records: List[Dict]) -> int:
        numbers = [int(r['id']) for r in records if str(r.get('id', '')).isdecimal()]
        return max(numbers, default=0) + 1

    # ============================================
    # GAMES
    # ============================================

    def list_games(self) -> List[Dict]:
        return self.find_all(GAMES)

    def find_game_by_id(self, game_id: str) -> Optional[Dict]:
        return self.find_by_id(GAMES, game_id)

    def next_game_id(self) -> str:
        """
        Generate an id not used by any current game

        Returns:
            New game id as a string
        """
        with self.lock:
            while True:
                if self.id_strategy == 'uuid':
                    candidate = uuid.uuid4().hex
                else:
                    candidate = str(next(self._game_sequence))
                if not self.exists(GAMES, candidate):
                    return candidate

    # ============================================
    # AUTHORS
    # ============================================

    def list_authors(self) -> List[Dict]:
        return self.find_all(AUTHORS)

    def find_author_by_id(self, author_id: str) -> Optional[Dict]:
        return self.find_by_id(AUTHORS, author_id)

    # ============================================
    # REVIEWS
    # ============================================

    def list_reviews(self) -> List[Dict]:
        return self.find_all(REVIEWS)

    def find_review_by_id(self, review_id: str) -> Optional[Dict]:
        return self.find_by_id(REVIEWS, review_id)

    def stats(self) -> Dict[str, int]:
        """Record counts per collection"""
        with self.lock:
            return {name: self.count(name) for name in (GAMES, AUTHORS, REVIEWS)}
