from datetime import datetime, timezone
import random
import string

from scorecard import db


def _utcnow():
    return datetime.now(timezone.utc)


def generate_document_id(length=20):
    """Generate a unique random document id."""
    alphabet = string.ascii_letters + string.digits
    while True:
        doc_id = ''.join(random.choices(alphabet, k=length))
        if not db.session.get(GameDocument, doc_id):
            return doc_id


class GameDocument(db.Model):
    """One game stored as a JSON document, with the owner pulled out for querying."""

    __tablename__ = 'game_document'
    id = db.Column(db.String(20), primary_key=True)
    user_id = db.Column(db.String(128), nullable=False, index=True)
    data = db.Column(db.JSON, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)

    def __init__(self, **kwargs):
        super(GameDocument, self).__init__(**kwargs)
        if not self.id:
            self.id = generate_document_id()

    def to_dict(self):
        return dict(self.data or {})
