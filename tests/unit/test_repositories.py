"""
Unit Tests for Repositories
Tests for the base in-memory repository and the record store
"""

import pytest

from game_reviews.repositories import BaseRepository, RecordStore, GAMES, REVIEWS


# ============================================
# BASE REPOSITORY TESTS
# ============================================

@pytest.mark.unit
@pytest.mark.repo
class TestBaseRepository:
    """Test BaseRepository"""

    @pytest.fixture
    def repo(self):
        return BaseRepository({
            'items': [
                {'id': 'a', 'kind': 'x'},
                {'id': 'b', 'kind': 'y'},
                {'id': 'a', 'kind': 'z'},
            ]
        })

    def test_find_by_id_first_match_wins(self, repo):
        """Duplicate ids resolve to the first record"""
        assert repo.find_by_id('items', 'a')['kind'] == 'x'

    def test_find_by_id_missing(self, repo):
        assert repo.find_by_id('items', 'nope') is None

    def test_find_where(self, repo):
        assert [r['id'] for r in repo.find_where('items', 'kind', 'y')] == ['b']

    def test_find_all_returns_snapshot(self, repo):
        """Mutating the returned list does not touch the collection"""
        records = repo.find_all('items')
        records.clear()

        assert repo.count('items') == 3

    def test_replace_keeps_position(self, repo):
        replaced = repo.replace('items', 'b', {'id': 'b', 'kind': 'w'})

        assert replaced
        assert [r['kind'] for r in repo.find_all('items')] == ['x', 'w', 'z']

    def test_replace_missing(self, repo):
        assert not repo.replace('items', 'nope', {'id': 'nope'})

    def test_remove(self, repo):
        assert repo.remove('items', 'a') == 2
        assert repo.remove('items', 'a') == 0
        assert repo.count('items') == 1

    def test_unknown_collection(self, repo):
        with pytest.raises(KeyError):
            repo.find_all('missing')


# ============================================
# RECORD STORE TESTS
# ============================================

@pytest.mark.unit
@pytest.mark.repo
class TestRecordStore:
    """Test RecordStore"""

    def test_seed_data(self, store):
        """Test seeded collections in insertion order"""
        assert [g['id'] for g in store.list_games()] == ['1', '2', '3']
        assert [a['id'] for a in store.list_authors()] == ['201', '202', '203']
        assert [r['id'] for r in store.list_reviews()] == ['101', '102', '103', '104']

    def test_find_game_by_id(self, store):
        game = store.find_game_by_id('1')

        assert game == {'id': '1', 'title': 'Legend of Code', 'platform': ['PC', 'Switch']}

    def test_find_author_by_id(self, store):
        assert store.find_author_by_id('202')['name'] == 'Bob Coder'
        assert store.find_author_by_id('202')['verified'] is False

    def test_find_review_by_id(self, store):
        review = store.find_review_by_id('104')

        assert review['rating'] == 2
        assert review['author_id'] == '202'
        assert review['game_id'] == '1'

    @pytest.mark.parametrize('finder', [
        'find_game_by_id', 'find_author_by_id', 'find_review_by_id'
    ])
    def test_find_unknown_id_is_absent(self, store, finder):
        assert getattr(store, finder)('999') is None

    def test_stores_do_not_share_state(self):
        """Each seeded store owns its own records"""
        first = RecordStore.with_seed_data()
        second = RecordStore.with_seed_data()

        first.remove(GAMES, '1')
        first.find_review_by_id('101')['rating'] = 1

        assert second.find_game_by_id('1') is not None
        assert second.find_review_by_id('101')['rating'] == 5

    def test_empty_store(self):
        store = RecordStore()

        assert store.list_games() == []
        assert store.list_authors() == []
        assert store.list_reviews() == []
        assert store.stats() == {'games': 0, 'authors': 0, 'reviews': 0}

    def test_sequence_ids_follow_seed(self, store):
        assert store.next_game_id() == '4'
        assert store.next_game_id() == '5'

    def test_sequence_skips_used_ids(self):
        store = RecordStore(games=[
            {'id': '1', 'title': 'A', 'platform': []},
            {'id': 'x', 'title': 'B', 'platform': []},
        ])
        store.append(GAMES, {'id': '2', 'title': 'C', 'platform': []})

        assert store.next_game_id() == '3'

    def test_sequence_ignores_non_decimal_digits(self):
        """Superscript digits are not numeric ids"""
        store = RecordStore(games=[
            {'id': '\u00b2', 'title': 'A', 'platform': []},
            {'id': '7', 'title': 'B', 'platform': []},
        ])

        assert store.next_game_id() == '8'

    def test_uuid_ids(self):
        store = RecordStore.with_seed_data(id_strategy='uuid')

        first = store.next_game_id()
        second = store.next_game_id()

        assert len(first) == 32
        assert first != second

    def test_unknown_id_strategy(self):
        with pytest.raises(ValueError):
            RecordStore(id_strategy='random')

    def test_stats(self, store):
        assert store.stats() == {'games': 3, 'authors': 3, 'reviews': 4}
        assert store.count(REVIEWS) == 4
