"""Translate storage constraint failures into domain errors."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from workout_log.core.errors import ConstraintError, NotFoundError

logger = logging.getLogger(__name__)

# PostgreSQL foreign_key_violation
_FK_SQLSTATE = "23503"


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    """True when the failed write referenced a parent row that is gone."""
    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code is not None:
        return code == _FK_SQLSTATE
    # SQLite: "FOREIGN KEY constraint failed"
    return "foreign key" in str(orig).lower()


async def flush_or_conflict(
    db: AsyncSession,
    detail: str,
    error_class: type[ConstraintError] = ConstraintError,
) -> None:
    """
    Flush pending writes; an IntegrityError becomes ``error_class(detail)``.

    A foreign-key failure means a parent was deleted after the ownership check
    and is raised as NotFoundError instead. Not retried: the session is left
    for ``get_db`` to roll back.
    """
    try:
        await db.flush()
    except IntegrityError as exc:
        if is_foreign_key_violation(exc):
            logger.warning("Referenced row vanished before write: %s", exc.orig)
            raise NotFoundError("Referenced record no longer exists") from exc
        logger.warning("Constraint violation: %s (%s)", detail, exc.orig)
        raise error_class(detail) from exc
