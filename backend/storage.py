# storage.py
from sqlalchemy.exc import SQLAlchemyError

from models import db, StorageItem


class StorageError(Exception):
    """A key-value backend failed to read or write."""


class KeyValueStorage:
    """String key -> string value store, like the device's async storage."""

    def get_item(self, key):
        raise NotImplementedError

    def set_item(self, key, value):
        raise NotImplementedError


class MemoryStorage(KeyValueStorage):
    def __init__(self, items=None):
        self.items = dict(items or {})

    def get_item(self, key):
        return self.items.get(key)

    def set_item(self, key, value):
        self.items[key] = value


class SQLStorage(KeyValueStorage):
    """Backed by the storage_items table; needs an active app context."""

    def get_item(self, key):
        try:
            item = db.session.get(StorageItem, key)
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageError(f"could not read {key!r}") from e
        return item.value if item else None

    def set_item(self, key, value):
        try:
            item = db.session.get(StorageItem, key)
            if item is None:
                db.session.add(StorageItem(key=key, value=value))
            else:
                item.value = value
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageError(f"could not write {key!r}") from e
