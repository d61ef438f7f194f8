"""
Game Mutation Handler
The only component allowed to change the games collection
"""

from typing import Any, Dict, List, Optional

from prometheus_client import Counter

from ..config.logger import LoggerMixin
from ..repositories import RecordStore, GAMES

EDITABLE_FIELDS = ('title', 'platform')

GAME_MUTATIONS = Counter(
    'game_mutations_total',
    'Game mutations handled, by operation and outcome',
    ['operation', 'outcome']
)


class GameMutationHandler(LoggerMixin):
    """
    Service for creating, updating and deleting games

    Provides:
    - add_game: append a new game with a generated id
    - update_game: field-level merge of title/platform
    - delete_game: remove a game, leaving its reviews in place

    Mutating an unknown id is a silent no-op for the caller.
    """

    def __init__(self, store: RecordStore):
        """
        Initialize Game Mutation Handler

        Args:
            store: RecordStore instance
        """
        self.store = store

    def add_game(self, game_input: Dict[str, Any]) -> Dict:
        """
        Create a new game

        Args:
            game_input: Dictionary with:
                - title: str
                - platform: list of str

        Returns:
            The stored game record
        """
        with self.store.lock:
            game = {
                'id': self.store.next_game_id(),
                'title': game_input['title'],
                'platform': list(game_input['platform']),
            }
            self.store.append(GAMES, game)

        GAME_MUTATIONS.labels(operation='add', outcome='applied').inc()
        self.log_info(f"Game {game['id']} added", title=game['title'])
        return game

    def update_game(self, game_id: str, edits: Dict[str, Any]) -> Optional[Dict]:
        """
        Merge edits into an existing game

        Only title and platform can change; keys that are missing or None
        leave the stored value untouched.

        Args:
            game_id: Game ID
            edits: Partial game fields

        Returns:
            Updated game record, or None if the game does not exist
        """
        changes = {
            field: edits[field]
            for field in EDITABLE_FIELDS
            if edits.get(field) is not None
        }
        if 'platform' in changes:
            changes['platform'] = list(changes['platform'])

        with self.store.lock:
            current = self.store.find_game_by_id(game_id)
            if current is None:
                GAME_MUTATIONS.labels(operation='update', outcome='noop').inc()
                self.log_warning(f"Update ignored, game {game_id} not found")
                return None

            updated = {**current, **changes, 'id': current['id']}
            self.store.replace(GAMES, game_id, updated)

        GAME_MUTATIONS.labels(operation='update', outcome='applied').inc()
        self.log_info(f"Game {game_id} updated", fields=sorted(changes))
        return updated

    def delete_game(self, game_id: str) -> List[Dict]:
        """
        Delete a game

        Reviews of the deleted game are kept and keep pointing at its id.

        Args:
            game_id: Game ID

        Returns:
            The remaining games collection
        """
        with self.store.lock:
            removed = self.store.remove(GAMES, game_id)
            remaining = self.store.list_games()

        if removed:
            GAME_MUTATIONS.labels(operation='delete', outcome='applied').inc()
            self.log_info(f"Game {game_id} deleted")
        else:
            GAME_MUTATIONS.labels(operation='delete', outcome='noop').inc()
            self.log_warning(f"Delete ignored, game {game_id} not found")

        return remaining
