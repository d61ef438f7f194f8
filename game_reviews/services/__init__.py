"""
Services Package
Relationship resolution and mutation logic over the record store
"""

from .relationship_resolver import RelationshipResolver
from .mutation_handler import GameMutationHandler

__all__ = [
    'RelationshipResolver',
    'GameMutationHandler'
]
