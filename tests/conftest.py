"""
Pytest Configuration and Fixtures
Shared fixtures and configuration for all tests
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from game_reviews.config.settings import TestingConfig
from game_reviews.main import create_app


# ============================================
# APP & CONFIG FIXTURES
# ============================================

@pytest.fixture(scope='session')
def app_config():
    """Get testing configuration"""
    return TestingConfig()


@pytest.fixture
def app(app_config, store):
    """Create Flask app for testing, serving the test's store"""
    return create_app(app_config, store=store)


@pytest.fixture
def client(app):
    """Get Flask test client"""
    return app.test_client()


# ============================================
# STORE & SERVICE FIXTURES
# ============================================

@pytest.fixture
def store():
    """Get a freshly seeded RecordStore"""
    from game_reviews.repositories import RecordStore
    return RecordStore.with_seed_data()


@pytest.fixture
def relationships(store):
    """Get RelationshipResolver"""
    from game_reviews.services import RelationshipResolver
    return RelationshipResolver(store)


@pytest.fixture
def mutations(store):
    """Get GameMutationHandler"""
    from game_reviews.services import GameMutationHandler
    return GameMutationHandler(store)


@pytest.fixture
def graphql_context(store):
    """Get ResolversContext around the test store"""
    from game_reviews.graphql import ResolversContext
    return ResolversContext.from_store(store)


@pytest.fixture
def execute(graphql_context):
    """Execute a GraphQL operation against the test store"""
    from game_reviews.graphql import schema

    def _execute(query, variables=None):
        result = schema.execute_sync(
            query,
            variable_values=variables,
            context_value=graphql_context
        )
        assert result.errors is None, result.errors
        return result.data

    return _execute


# ============================================
# TEST DATA FIXTURES
# ============================================

@pytest.fixture
def sample_game_input():
    """Sample addGame input"""
    return {
        'title': 'Elden Ring',
        'platform': ['PC', 'PlayStation', 'Xbox']
    }


# ============================================
# MARKERS
# ============================================

def pytest_configure(config):
    """Configure pytest markers"""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "api: mark test as API test")
    config.addinivalue_line("markers", "repo: mark test as repository test")
    config.addinivalue_line("markers", "service: mark test as service test")
