"""
Seed records loaded into every new RecordStore
"""

GAMES = [
    {'id': '1', 'title': 'Legend of Code', 'platform': ['PC', 'Switch']},
    {'id': '2', 'title': 'Bug Hunter 3000', 'platform': ['Xbox', 'PlayStation']},
    {'id': '3', 'title': 'Terminal Quest', 'platform': ['PC']},
]

AUTHORS = [
    {'id': '201', 'name': 'Alice Devlin', 'verified': True},
    {'id': '202', 'name': 'Bob Coder', 'verified': False},
    {'id': '203', 'name': 'Charlie Script', 'verified': True},
]

REVIEWS = [
    {
        'id': '101',
        'rating': 5,
        'content': 'Absolutely loved the gameplay and story!',
        'author_id': '201',
        'game_id': '1',
    },
    {
        'id': '102',
        'rating': 3,
        'content': 'Fun mechanics but gets repetitive after a while.',
        'author_id': '202',
        'game_id': '2',
    },
    {
        'id': '103',
        'rating': 4,
        'content': 'Solid experience, great graphics and soundtrack.',
        'author_id': '203',
        'game_id': '3',
    },
    {
        'id': '104',
        'rating': 2,
        'content': 'Too many bugs, felt unfinished.',
        'author_id': '202',
        'game_id': '1',
    },
]
