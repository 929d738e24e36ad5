import logging
from functools import wraps
from sqlalchemy.exc import SQLAlchemyError

from wallet_api.exceptions import StoreError

logger = logging.getLogger(__name__)

# Largest value a BIGINT column or an SQLite integer can hold
MAX_ID = 2 ** 63 - 1


def db_transaction(func):
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        try:
            return func(self, *args, **kwargs)
        except (SQLAlchemyError, OverflowError) as e:
            self.db.rollback()
            logger.error(f"Database error in {func.__name__}: {e}")
            raise StoreError(str(e)) from e
    return wrapper

def parse_id(value: str, name: str) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise StoreError(f"invalid {name}: {value!r}") from None
    if not -MAX_ID - 1 <= parsed <= MAX_ID:
        raise StoreError(f"invalid {name}: {value!r} is out of range")
    return parsed

def commit_and_refresh(db, entity):
    db.commit()
    db.refresh(entity)
    return entity
