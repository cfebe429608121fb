"""Reference list maintenance shared by the user and orders-pack repositories."""

from uuid import UUID

from sqlalchemy import Column, Table, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession


async def append_reference(
    db: AsyncSession,
    table: Table,
    owner_column: Column,
    owner_id: UUID,
    ref_column: Column,
    ref_id: UUID,
) -> None:
    """Append ref_id at the end of owner_id's list.

    Read-then-write: two concurrent appends may compute the same position.
    Both rows survive; ordering between them is then undefined.
    """
    result = await db.execute(
        select(func.coalesce(func.max(table.c.position), -1))
        .where(owner_column == owner_id),
    )
    position = result.scalar_one() + 1
    await db.execute(
        insert(table).values({
            owner_column.name: owner_id,
            ref_column.name: ref_id,
            "position": position,
        }),
    )


async def remove_reference(
    db: AsyncSession,
    table: Table,
    owner_column: Column,
    owner_id: UUID,
    ref_column: Column,
    ref_id: UUID,
) -> None:
    """Remove ref_id from owner_id's list. Missing references are a no-op."""
    await db.execute(
        delete(table)
        .where(owner_column == owner_id)
        .where(ref_column == ref_id),
    )
