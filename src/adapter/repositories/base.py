import functools

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.domain.errors import DependencyError, StoreConflictError


async def release(session: AsyncSession) -> None:
    """
    End the open transaction without expiring loaded rows.

    Every write commits on its own, so only read state is dropped here.
    Instances are detached first; a rollback would otherwise expire them
    and the next attribute access would need a lazy load.
    """
    session.expunge_all()
    await session.rollback()


def translate_errors(operation: str):
    """Turn SQLAlchemy failures into the engine's dependency errors"""

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            try:
                return await func(self, *args, **kwargs)
            except IntegrityError as exc:
                await release(self.session)
                raise StoreConflictError(operation, exc.orig) from exc
            except SQLAlchemyError as exc:
                await release(self.session)
                raise DependencyError(operation, exc) from exc

        return wrapper

    return decorator
