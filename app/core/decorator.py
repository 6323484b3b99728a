import logging
from functools import wraps

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.exceptions import ConflictError, InternalError

logger = logging.getLogger(__name__)


def db_exception(func):
    """
    Reclassify storage errors raised inside a service method.

    The wrapped method must belong to an object exposing ``self.db``; the
    session is rolled back before the error is re-raised as part of the
    application taxonomy.
    """

    @wraps(func)
    def wrapper(self, *args, **kwargs):
        try:
            return func(self, *args, **kwargs)
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("Duplicate entry: already exists")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"{func.__qualname__} failed: {type(e).__name__}", exc_info=True)
            raise InternalError("Database error occurred")

    return wrapper
