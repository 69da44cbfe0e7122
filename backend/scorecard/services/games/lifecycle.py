from datetime import datetime, timezone
import functools
import logging

from scorecard.errors import DomainException, InvalidPayload, NotFound, StoreFailure
from scorecard.services.scorecard import (
    aggregate_player_information,
    build_hole_update,
    initialize_scorecard,
)

logger = logging.getLogger(__name__)


def utc_timestamp(now=None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def _store_boundary(action):
    """Let domain errors through; report anything else as a StoreFailure."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except DomainException:
                raise
            except Exception as exc:
                logger.error(f"Error {action}", exc_info=True)
                raise StoreFailure(f"{action}: {exc}") from exc
        return wrapper
    return decorator


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _non_empty_str(value) -> bool:
    return isinstance(value, str) and value.strip() != ''


def validate_game_payload(payload):
    """Return ``(number_holes, players, title)`` or raise InvalidPayload."""
    if not isinstance(payload, dict):
        raise InvalidPayload('body must be a JSON object')
    number_holes = payload.get('numberHoles')
    players = payload.get('players')
    title = payload.get('title')

    if not _is_positive_int(number_holes):
        raise InvalidPayload('numberHoles must be a positive integer')
    if not isinstance(players, list) or not players:
        raise InvalidPayload('players must be a non-empty list')
    for player in players:
        if not isinstance(player, dict) or not _non_empty_str(player.get('name')):
            raise InvalidPayload('every player needs a name')
        if player.get('uid') is not None and not isinstance(player['uid'], str):
            raise InvalidPayload('player uid must be a string')
    if not _non_empty_str(title):
        raise InvalidPayload('title must be a non-empty string')
    return number_holes, players, title


class GameService:
    """Create, read, score and delete games held in a document store."""

    def __init__(self, store, enforce_ownership=False, clock=None):
        self.store = store
        self.enforce_ownership = enforce_ownership
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def _owned(self, game, user) -> bool:
        if not self.enforce_ownership:
            return True
        return user is not None and game.get('userId') == user.uid

    @_store_boundary('fetching all games')
    def list_games(self, user):
        return [
            {'id': game_id, 'title': game.get('title'), 'date': game.get('date')}
            for game_id, game in self.store.list_by_owner(user.uid)
        ]

    @_store_boundary('fetching game')
    def fetch_game(self, game_id, user=None):
        game = self.store.get(game_id)
        if game is None or not self._owned(game, user):
            raise NotFound(f'game {game_id}')

        holes, players = aggregate_player_information(game)
        game['holes'] = holes
        game['players'] = players
        game['id'] = game_id
        return game

    @_store_boundary('creating a game')
    def create_game(self, user, payload):
        number_holes, players, title = validate_game_payload(payload)
        indexed_players, holes = initialize_scorecard(players, number_holes)
        game = {
            'date': utc_timestamp(self.clock()),
            'holes': holes,
            'players': indexed_players,
            'title': title,
            'userId': user.uid,
        }
        game_id = self.store.add(game)
        logger.info(f"[create] game={game_id} holes={number_holes} players={len(indexed_players)}")
        return game_id

    @_store_boundary('deleting game')
    def delete_game(self, game_id, user=None):
        game = self.store.get(game_id)
        if game is None or not self._owned(game, user):
            raise NotFound(f'game {game_id}')
        self.store.delete(game_id)
        logger.info(f"[delete] game={game_id}")

    @_store_boundary('updating hole score')
    def update_hole_score(self, game_id, hole_key, scores, user=None):
        if self.enforce_ownership:
            game = self.store.get(game_id)
            if game is None or not self._owned(game, user):
                raise NotFound(f'game {game_id}')
        self.store.update(game_id, build_hole_update(hole_key, scores))
        logger.info(f"[update] game={game_id} hole={hole_key}")
