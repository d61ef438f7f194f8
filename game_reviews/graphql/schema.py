"""
GraphQL Schema Definition
Root queries and mutations over games, authors and reviews
Apollo Federation v2 Subgraph
"""

from typing import List, Optional

import strawberry
from strawberry.types import Info

from .types import Game, Author, Review, AddGameInput, EditGameInput
from .resolvers import (
    list_games_resolver, get_game_resolver,
    list_authors_resolver, get_author_resolver,
    list_reviews_resolver, get_review_resolver,
    add_game_resolver, update_game_resolver, delete_game_resolver
)


# ============================================
# QUERIES
# ============================================

@strawberry.type
class Query:
    """GraphQL Queries"""

    @strawberry.field
    def games(self, info: Info) -> List[Game]:
        """List all games"""
        return list_games_resolver(info.context)

    @strawberry.field
    def game(self, info: Info, id: strawberry.ID) -> Optional[Game]:
        """Get game by ID"""
        return get_game_resolver(info.context, id)

    @strawberry.field
    def authors(self, info: Info) -> List[Author]:
        """List all authors"""
        return list_authors_resolver(info.context)

    @strawberry.field
    def author(self, info: Info, id: strawberry.ID) -> Optional[Author]:
        """Get author by ID"""
        return get_author_resolver(info.context, id)

    @strawberry.field
    def reviews(self, info: Info) -> List[Review]:
        """List all reviews"""
        return list_reviews_resolver(info.context)

    @strawberry.field
    def review(self, info: Info, id: strawberry.ID) -> Optional[Review]:
        """Get review by ID"""
        return get_review_resolver(info.context, id)


# ============================================
# MUTATIONS
# ============================================

@strawberry.type
class Mutation:
    """GraphQL Mutations"""

    @strawberry.mutation
    def add_game(self, info: Info, game: AddGameInput) -> Game:
        """Create new game"""
        return add_game_resolver(info.context, game)

    @strawberry.mutation
    def update_game(
        self,
        info: Info,
        id: strawberry.ID,
        edits: EditGameInput
    ) -> Optional[Game]:
        """Update title and/or platform of a game"""
        return update_game_resolver(info.context, id, edits)

    @strawberry.mutation
    def delete_game(self, info: Info, id: strawberry.ID) -> List[Game]:
        """Delete game, returning the remaining games"""
        return delete_game_resolver(info.context, id)


# ============================================
# SCHEMA
# ============================================

schema = strawberry.federation.Schema(
    query=Query,
    mutation=Mutation,
    types=[Game, Author, Review]
)
