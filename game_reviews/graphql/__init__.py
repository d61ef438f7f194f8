"""
GraphQL Package
GraphQL API implementation with schema, types and resolvers
"""

from .schema import schema
from .resolvers import ResolversContext

__all__ = [
    'schema',
    'ResolversContext'
]
