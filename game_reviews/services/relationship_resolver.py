"""
Relationship Resolver
Derives the virtual relationship fields between games, authors and reviews
"""

from typing import Dict, List, Optional

from ..config.logger import LoggerMixin
from ..repositories import RecordStore, REVIEWS


class RelationshipResolver(LoggerMixin):
    """
    Resolves foreign-key relationships by scanning the RecordStore

    Every call reads the current store state; nothing is cached.
    """

    def __init__(self, store: RecordStore):
        """
        Initialize Relationship Resolver

        Args:
            store: RecordStore instance
        """
        self.store = store

    def reviews_for_game(self, game: Dict) -> List[Dict]:
        """
        Get all reviews written about a game

        Args:
            game: Game record (only its id is used)

        Returns:
            Reviews in insertion order, empty list if none
        """
        return self.store.find_where(REVIEWS, 'game_id', game['id'])

    def reviews_for_author(self, author: Dict) -> List[Dict]:
        """
        Get all reviews written by an author

        Args:
            author: Author record (only its id is used)

        Returns:
            Reviews in insertion order, empty list if none
        """
        return self.store.find_where(REVIEWS, 'author_id', author['id'])

    def author_of_review(self, review: Dict) -> Optional[Dict]:
        """Author who wrote the review, None if the reference dangles"""
        author = self.store.find_author_by_id(review['author_id'])
        if author is None:
            self.log_debug(
                f"Review {review['id']} references missing author {review['author_id']}"
            )
        return author

    def game_of_review(self, review: Dict) -> Optional[Dict]:
        """Game the review is about, None if the reference dangles"""
        game = self.store.find_game_by_id(review['game_id'])
        if game is None:
            self.log_debug(
                f"Review {review['id']} references missing game {review['game_id']}"
            )
        return game
