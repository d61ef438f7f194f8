"""
Game Reviews GraphQL Service
In-memory games, authors and reviews served over GraphQL
"""

__version__ = '1.0.0'
