"""Logging wrapper for service methods that touch the database."""

import functools
import logging
from typing import Any, Callable, TypeVar

from sqlalchemy.exc import SQLAlchemyError

F = TypeVar("F", bound=Callable[..., Any])

logger = logging.getLogger("restaurant_api.services")


def logs_persistence_errors(action: str) -> Callable[[F], F]:
    """Logs a database failure for `action` and re-raises it unchanged.

    No retry and no wrapping: the caller sees the same SQLAlchemyError,
    which the global handler turns into a 500.

    Example:
        @logs_persistence_errors("Menu item creation")
        async def create_menu_item(self, db, data): ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except SQLAlchemyError as e:
                logger.error("%s failed: %s", action, e, exc_info=True)
                raise

        return wrapper  # type: ignore

    return decorator
