"""Document store for games.

The game service only ever talks to a :class:`GameStore`: list by owner,
fetch by id, add, update named fields and delete. Field updates use dotted
paths (``holes.3``): the first segment names a top-level field and the
rest, dots included, is one key inside it.
"""
from abc import ABC, abstractmethod
import copy
from typing import Dict, List, Optional, Tuple


class DocumentNotFound(Exception):
    def __init__(self, doc_id):
        super().__init__(f'document {doc_id!r} does not exist')
        self.doc_id = doc_id


def apply_field_updates(document: dict, fields: Dict[str, object]) -> dict:
    """Return a copy of ``document`` with each field path in ``fields`` replaced.

    ``holes.1.5`` sets key ``"1.5"`` of ``holes``; sibling keys are kept.
    """
    updated = copy.deepcopy(document)
    for path, value in fields.items():
        field, _, key = path.partition('.')
        if not key:
            updated[field] = copy.deepcopy(value)
            continue
        target = updated.get(field)
        if not isinstance(target, dict):
            target = {}
            updated[field] = target
        target[key] = copy.deepcopy(value)
    return updated


class GameStore(ABC):
    @abstractmethod
    def list_by_owner(self, user_id: str) -> List[Tuple[str, dict]]:
        ...

    @abstractmethod
    def get(self, game_id: str) -> Optional[dict]:
        ...

    @abstractmethod
    def add(self, document: dict) -> str:
        ...

    @abstractmethod
    def update(self, game_id: str, fields: Dict[str, object]) -> None:
        ...

    @abstractmethod
    def delete(self, game_id: str) -> None:
        ...


class InMemoryGameStore(GameStore):
    def __init__(self):
        self._games: Dict[str, dict] = {}
        self._next_id = 1

    def list_by_owner(self, user_id):
        return [(gid, copy.deepcopy(doc)) for gid, doc in self._games.items() if doc.get('userId') == user_id]

    def get(self, game_id):
        doc = self._games.get(game_id)
        return copy.deepcopy(doc) if doc is not None else None

    def add(self, document):
        game_id = f'game-{self._next_id}'
        self._next_id += 1
        self._games[game_id] = copy.deepcopy(document)
        return game_id

    def update(self, game_id, fields):
        if game_id not in self._games:
            raise DocumentNotFound(game_id)
        self._games[game_id] = apply_field_updates(self._games[game_id], fields)

    def delete(self, game_id):
        self._games.pop(game_id, None)


class SQLAlchemyGameStore(GameStore):
    """Stores each game as a row of ``game_document`` with a JSON body."""

    def __init__(self, session):
        self.session = session

    def list_by_owner(self, user_id):
        from scorecard.models import GameDocument
        rows = (
            GameDocument.query.filter_by(user_id=user_id)
            .order_by(GameDocument.created_at, GameDocument.id)
            .all()
        )
        return [(row.id, row.to_dict()) for row in rows]

    def get(self, game_id):
        from scorecard.models import GameDocument
        row = self.session.get(GameDocument, game_id)
        return row.to_dict() if row else None

    def add(self, document):
        from scorecard.models import GameDocument
        row = GameDocument(user_id=document['userId'], data=copy.deepcopy(document))
        self.session.add(row)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return row.id

    def update(self, game_id, fields):
        from scorecard.models import GameDocument
        row = self.session.get(GameDocument, game_id)
        if row is None:
            raise DocumentNotFound(game_id)
        # Reassign so the JSON column is flagged as changed
        row.data = apply_field_updates(row.data or {}, fields)
        if 'userId' in fields:
            row.user_id = fields['userId']
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def delete(self, game_id):
        from scorecard.models import GameDocument
        row = self.session.get(GameDocument, game_id)
        if row is None:
            return
        self.session.delete(row)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
