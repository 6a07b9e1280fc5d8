# src/db/crud.py
from __future__ import annotations

from typing import Optional

from db.database import connect


async def read_value(key: str) -> Optional[str]:
    """Return the raw value stored under key, or None if the slot is empty."""
    async with connect() as conn:
        cur = await conn.execute("SELECT value FROM kv_store WHERE key = ?;", (key,))
        row = await cur.fetchone()
        await cur.close()
    return row[0] if row else None


async def write_value(key: str, value: str) -> None:
    """Store value under key, overwriting whatever was there."""
    async with connect() as conn:
        await conn.execute(
            """
            INSERT INTO kv_store(key, value) VALUES (?, ?)
            ON CONFLICT(key) DO UPDATE SET value = excluded.value;
            """,
            (key, value),
        )
        await conn.commit()
