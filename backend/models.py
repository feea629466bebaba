from flask_sqlalchemy import SQLAlchemy
from datetime import datetime, timezone

db = SQLAlchemy()


def _utcnow():
    return datetime.now(timezone.utc)


class StorageItem(db.Model):
    __tablename__ = "storage_items"

    # One row per collection key, e.g. "thought_entries"
    key = db.Column(db.String(100), primary_key=True)

    # Whole collection as a JSON array string
    value = db.Column(db.Text, nullable=False)

    updated_at = db.Column(db.DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    def __repr__(self):
        return f"<StorageItem key={self.key}>"
