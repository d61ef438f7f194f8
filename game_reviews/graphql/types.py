"""
GraphQL Object and Input Types
Games, authors and reviews exposed as Apollo Federation entities
"""

from typing import Dict, List, Optional

import strawberry
from strawberry.types import Info


# ============================================
# ENTITY TYPES
# ============================================

@strawberry.federation.type(keys=["id"])
class Game:
    """Video game - Apollo Federation entity"""
    id: strawberry.ID
    title: str
    platform: List[str]

    @strawberry.field
    def reviews(self, info: Info) -> List["Review"]:
        """Reviews written about this game"""
        records = info.context.relationships.reviews_for_game({'id': self.id})
        return [Review.from_record(r) for r in records]

    @classmethod
    def from_record(cls, record: Dict) -> "Game":
        return cls(
            id=strawberry.ID(record['id']),
            title=record['title'],
            platform=list(record['platform'])
        )

    @classmethod
    def resolve_reference(cls, id: strawberry.ID, info: Info) -> Optional["Game"]:
        """Resolve Game entity reference for federation"""
        record = info.context.store.find_game_by_id(id)
        return cls.from_record(record) if record else None


@strawberry.federation.type(keys=["id"])
class Author:
    """Review author - Apollo Federation entity"""
    id: strawberry.ID
    name: str
    verified: bool

    @strawberry.field
    def reviews(self, info: Info) -> List["Review"]:
        """Reviews written by this author"""
        records = info.context.relationships.reviews_for_author({'id': self.id})
        return [Review.from_record(r) for r in records]

    @classmethod
    def from_record(cls, record: Dict) -> "Author":
        return cls(
            id=strawberry.ID(record['id']),
            name=record['name'],
            verified=record['verified']
        )

    @classmethod
    def resolve_reference(cls, id: strawberry.ID, info: Info) -> Optional["Author"]:
        """Resolve Author entity reference for federation"""
        record = info.context.store.find_author_by_id(id)
        return cls.from_record(record) if record else None


@strawberry.federation.type(keys=["id"])
class Review:
    """Game review - Apollo Federation entity"""
    id: strawberry.ID
    rating: int
    content: str
    author_id: strawberry.Private[str]
    game_id: strawberry.Private[str]

    @strawberry.field
    def game(self, info: Info) -> Optional[Game]:
        """Reviewed game, null if it has been deleted"""
        record = info.context.relationships.game_of_review(self.to_record())
        return Game.from_record(record) if record else None

    @strawberry.field
    def author(self, info: Info) -> Optional[Author]:
        """Review author, null if the author is unknown"""
        record = info.context.relationships.author_of_review(self.to_record())
        return Author.from_record(record) if record else None

    def to_record(self) -> Dict:
        return {
            'id': self.id,
            'rating': self.rating,
            'content': self.content,
            'author_id': self.author_id,
            'game_id': self.game_id,
        }

    @classmethod
    def from_record(cls, record: Dict) -> "Review":
        return cls(
            id=strawberry.ID(record['id']),
            rating=record['rating'],
            content=record['content'],
            author_id=record['author_id'],
            game_id=record['game_id']
        )

    @classmethod
    def resolve_reference(cls, id: strawberry.ID, info: Info) -> Optional["Review"]:
        """Resolve Review entity reference for federation"""
        record = info.context.store.find_review_by_id(id)
        return cls.from_record(record) if record else None


# ============================================
# INPUT TYPES
# ============================================

@strawberry.input
class AddGameInput:
    """Fields of a new game; the id is generated by the server"""
    title: str
    platform: List[str]

    def to_dict(self) -> Dict:
        return {'title': self.title, 'platform': list(self.platform)}


@strawberry.input
class EditGameInput:
    """Partial game fields; omitted fields keep their value"""
    title: Optional[str] = strawberry.UNSET
    platform: Optional[List[str]] = strawberry.UNSET

    def to_dict(self) -> Dict:
        edits = {}
        if self.title is not strawberry.UNSET:
            edits['title'] = self.title
        if self.platform is not strawberry.UNSET:
            edits['platform'] = self.platform
        return edits
