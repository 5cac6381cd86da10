"""
Helpers shared by the SQLModel repositories.

Database exceptions never leave the adapter layer: they are logged with
their traceback and turned into STORAGE_FAILURE results. A violated unique
constraint is a CONFLICT naming the constraint.
"""

import logging
from typing import Any, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from accounts.app.errors import ErrorCode
from accounts.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=SQLModel)


def storage_failure(exc: SQLAlchemyError) -> Result:
    logger.exception("Database error: %s", exc.__class__.__name__)
    return Return.err(
        Error(ErrorCode.STORAGE_FAILURE, f"Database error: {exc.__class__.__name__}")
    )


def conflict(exc: IntegrityError) -> Result:
    logger.warning("Unique constraint violated: %s", exc.orig)
    return Return.err(Error(ErrorCode.CONFLICT, str(exc.orig)))


async def first_or_not_found(session: AsyncSession, stmt: Any, message: str) -> Result:
    try:
        result = await session.exec(stmt)
        row = result.first()
    except SQLAlchemyError as exc:
        return storage_failure(exc)

    if row is None:
        return Return.err(Error(ErrorCode.NOT_FOUND, message))
    return Return.ok(row)


async def save(session: AsyncSession, entity: E) -> Result[E]:
    try:
        session.add(entity)
        await session.flush()
        await session.refresh(entity)
    except IntegrityError as exc:
        return conflict(exc)
    except SQLAlchemyError as exc:
        return storage_failure(exc)
    return Return.ok(entity)
