from datetime import datetime, timezone

import pytest

from scorecard.auth import AuthUser
from scorecard.errors import InvalidPayload, NotFound, StoreFailure
from scorecard.services.games.lifecycle import GameService, utc_timestamp
from scorecard.store import InMemoryGameStore

ALICE = AuthUser(uid='alice', email='alice@example.com')
BOB = AuthUser(uid='bob')


def _fixed_clock():
    return datetime(2026, 3, 1, 9, 30, 0, 123456, tzinfo=timezone.utc)


@pytest.fixture()
def store():
    return InMemoryGameStore()


@pytest.fixture()
def service(store):
    return GameService(store, clock=_fixed_clock)


def _payload(**overrides):
    payload = {'title': 'Round', 'numberHoles': 2, 'players': [{'name': 'A'}, {'name': 'B'}]}
    payload.update(overrides)
    return payload


def test_utc_timestamp_format():
    assert utc_timestamp(_fixed_clock()) == '2026-03-01T09:30:00.123Z'


def test_create_persists_initialized_game(service, store):
    game_id = service.create_game(ALICE, _payload())

    stored = store.get(game_id)
    assert stored['title'] == 'Round'
    assert stored['userId'] == 'alice'
    assert stored['date'] == '2026-03-01T09:30:00.123Z'
    assert [p['scorecardIndex'] for p in stored['players']] == [0, 1]
    assert set(stored['holes']) == {'1', '2'}


@pytest.mark.parametrize('overrides', [
    {'numberHoles': 0},
    {'numberHoles': -3},
    {'numberHoles': '9'},
    {'numberHoles': True},
    {'numberHoles': None},
    {'players': []},
    {'players': None},
    {'players': [{'uid': 'x'}]},
    {'players': ['Alice']},
    {'players': [{'name': 'A', 'uid': 5}]},
    {'title': ''},
    {'title': '   '},
    {'title': None},
])
def test_create_rejects_invalid_payload(service, store, overrides):
    with pytest.raises(InvalidPayload):
        service.create_game(ALICE, _payload(**overrides))
    assert store.list_by_owner('alice') == []


def test_create_rejects_non_object_body(service):
    with pytest.raises(InvalidPayload):
        service.create_game(ALICE, None)


def test_list_returns_only_summaries_for_owner(service):
    first = service.create_game(ALICE, _payload(title='First'))
    second = service.create_game(ALICE, _payload(title='Second'))
    service.create_game(BOB, _payload(title='Bob game'))

    listed = service.list_games(ALICE)
    assert listed == [
        {'id': first, 'title': 'First', 'date': '2026-03-01T09:30:00.123Z'},
        {'id': second, 'title': 'Second', 'date': '2026-03-01T09:30:00.123Z'},
    ]
    assert all('players' not in g and 'holes' not in g for g in listed)


def test_fetch_returns_aggregated_view(service):
    game_id = service.create_game(ALICE, _payload())
    service.update_hole_score(game_id, '1', [{'scorecardIndex': 0, 'score': 3}, {'scorecardIndex': 1, 'score': 4}])
    service.update_hole_score(game_id, '2', [{'scorecardIndex': 0, 'score': None}, {'scorecardIndex': 1, 'score': 2}])

    game = service.fetch_game(game_id, ALICE)
    assert game['id'] == game_id
    assert [p['totalScore'] for p in game['players']] == [3, 6]
    assert [hs['name'] for hs in game['holes']['1']] == ['A', 'B']


def test_fetch_does_not_persist_aggregation(service, store):
    game_id = service.create_game(ALICE, _payload())
    service.fetch_game(game_id, ALICE)
    stored = store.get(game_id)
    assert 'totalScore' not in stored['players'][0]
    assert 'name' not in stored['holes']['1'][0]


def test_update_replaces_only_target_hole(service, store):
    game_id = service.create_game(ALICE, _payload(numberHoles=3))
    before = store.get(game_id)

    new_scores = [{'scorecardIndex': 1, 'score': 5}]
    service.update_hole_score(game_id, '2', new_scores)

    after = store.get(game_id)
    assert after['holes']['2'] == new_scores
    assert after['holes']['1'] == before['holes']['1']
    assert after['holes']['3'] == before['holes']['3']


def test_unknown_id_is_not_found_and_store_untouched(service, store):
    game_id = service.create_game(ALICE, _payload())
    snapshot = store.get(game_id)

    with pytest.raises(NotFound):
        service.fetch_game('missing', ALICE)
    with pytest.raises(NotFound):
        service.delete_game('missing', ALICE)
    assert store.get(game_id) == snapshot
    assert len(store.list_by_owner('alice')) == 1


def test_delete_removes_game(service, store):
    game_id = service.create_game(ALICE, _payload())
    service.delete_game(game_id, ALICE)
    assert store.get(game_id) is None
    with pytest.raises(NotFound):
        service.fetch_game(game_id, ALICE)


def test_update_of_missing_game_is_store_failure(service):
    with pytest.raises(StoreFailure):
        service.update_hole_score('missing', '1', [])


def test_ownership_not_checked_by_default(service):
    game_id = service.create_game(ALICE, _payload())
    assert service.fetch_game(game_id, BOB)['title'] == 'Round'


def test_enforced_ownership_hides_other_users_games(store):
    service = GameService(store, enforce_ownership=True)
    game_id = service.create_game(ALICE, _payload())

    with pytest.raises(NotFound):
        service.fetch_game(game_id, BOB)
    with pytest.raises(NotFound):
        service.update_hole_score(game_id, '1', [], BOB)
    with pytest.raises(NotFound):
        service.delete_game(game_id, BOB)

    assert service.fetch_game(game_id, ALICE)['userId'] == 'alice'


class _BrokenStore(InMemoryGameStore):
    def list_by_owner(self, user_id):
        raise ConnectionError('store is down')

    def add(self, document):
        raise ConnectionError('store is down')


def test_unexpected_store_errors_become_store_failure(caplog):
    service = GameService(_BrokenStore())
    with pytest.raises(StoreFailure):
        service.list_games(ALICE)
    with pytest.raises(StoreFailure):
        service.create_game(ALICE, _payload())
    assert 'Error fetching all games' in caplog.text


def test_validation_errors_pass_through_boundary():
    service = GameService(_BrokenStore())
    with pytest.raises(InvalidPayload):
        service.create_game(ALICE, _payload(title=''))
