"""Ownership guard: a record may only be mutated by the user who owns it."""

from __future__ import annotations

import uuid
from typing import Any, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ForbiddenError, NotFoundError

RecordT = TypeVar("RecordT")


def authorize(record: RecordT | None, requester_id: uuid.UUID, resource: str = "Record") -> RecordT:
    """
    Return the record when the requester owns it.
    Raises NotFoundError when it does not exist and ForbiddenError when it belongs to another user.
    """
    if record is None:
        raise NotFoundError(resource)
    if record.user_id != requester_id:  # type: ignore[attr-defined]
        raise ForbiddenError()
    return record


def parse_record_id(raw: str | uuid.UUID) -> uuid.UUID | None:
    """Parse a path id; anything that is not a UUID cannot match a stored record."""
    if isinstance(raw, uuid.UUID):
        return raw
    try:
        return uuid.UUID(raw)
    except (TypeError, ValueError):
        return None


async def get_owned_record(
    db: AsyncSession,
    model: type[RecordT],
    record_id: str | uuid.UUID,
    requester_id: uuid.UUID,
    resource: str,
    options: tuple[Any, ...] = (),
) -> RecordT:
    """Load a record by id (by id only, not scoped by user) and run it through authorize()."""
    parsed = parse_record_id(record_id)
    record = None
    if parsed is not None:
        stmt = select(model).where(model.id == parsed)
        if options:
            stmt = stmt.options(*options)
        result = await db.execute(stmt)
        record = result.scalar_one_or_none()
    return authorize(record, requester_id, resource)


async def delete_owned_record(
    db: AsyncSession,
    model: type[RecordT],
    record_id: str | uuid.UUID,
    requester_id: uuid.UUID,
    resource: str,
    options: tuple[Any, ...] = (),
) -> None:
    """Ownership check, then delete. Nothing is deleted when the check fails."""
    record = await get_owned_record(db, model, record_id, requester_id, resource, options)
    await db.delete(record)
    await db.flush()
