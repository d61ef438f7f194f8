"""
GraphQL Resolvers
Implementation of the root GraphQL queries and mutations
"""

from typing import List, Optional

from ..repositories import RecordStore
from ..services import RelationshipResolver, GameMutationHandler
from .types import Game, Author, Review, AddGameInput, EditGameInput


class ResolversContext:
    """Context containing all service dependencies"""

    def __init__(
        self,
        store: RecordStore,
        relationships: RelationshipResolver,
        mutations: GameMutationHandler
    ):
        self.store = store
        self.relationships = relationships
        self.mutations = mutations

    @classmethod
    def from_store(cls, store: RecordStore) -> 'ResolversContext':
        """Build the services around an existing store"""
        return cls(
            store=store,
            relationships=RelationshipResolver(store),
            mutations=GameMutationHandler(store)
        )


# ============================================
# QUERY RESOLVERS
# ============================================

def list_games_resolver(ctx: ResolversContext) -> List[Game]:
    """Resolver for games query"""
    return [Game.from_record(g) for g in ctx.store.list_games()]


def get_game_resolver(ctx: ResolversContext, game_id: str) -> Optional[Game]:
    """Resolver for game query"""
    game_data = ctx.store.find_game_by_id(game_id)
    if not game_data:
        return None
    return Game.from_record(game_data)


def list_authors_resolver(ctx: ResolversContext) -> List[Author]:
    """Resolver for authors query"""
    return [Author.from_record(a) for a in ctx.store.list_authors()]


def get_author_resolver(ctx: ResolversContext, author_id: str) -> Optional[Author]:
    """Resolver for author query"""
    author_data = ctx.store.find_author_by_id(author_id)
    if not author_data:
        return None
    return Author.from_record(author_data)


def list_reviews_resolver(ctx: ResolversContext) -> List[Review]:
    """Resolver for reviews query"""
    return [Review.from_record(r) for r in ctx.store.list_reviews()]


def get_review_resolver(ctx: ResolversContext, review_id: str) -> Optional[Review]:
    """Resolver for review query"""
    review_data = ctx.store.find_review_by_id(review_id)
    if not review_data:
        return None
    return Review.from_record(review_data)


# ============================================
# MUTATION RESOLVERS
# ============================================

def add_game_resolver(ctx: ResolversContext, game: AddGameInput) -> Game:
    """Resolver for addGame mutation"""
    return Game.from_record(ctx.mutations.add_game(game.to_dict()))


def update_game_resolver(
    ctx: ResolversContext,
    game_id: str,
    edits: EditGameInput
) -> Optional[Game]:
    """Resolver for updateGame mutation"""
    updated = ctx.mutations.update_game(game_id, edits.to_dict())
    if not updated:
        return None
    return Game.from_record(updated)


def delete_game_resolver(ctx: ResolversContext, game_id: str) -> List[Game]:
    """Resolver for deleteGame mutation"""
    return [Game.from_record(g) for g in ctx.mutations.delete_game(game_id)]
