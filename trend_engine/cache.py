"""Append-only snapshot cache with a fixed freshness window.

Two stores are provided: a JSON-lines file for local runs and a Supabase
(PostgREST) table for hosted deployments. Both only ever append rows. The
file store returns its last valid line, the table its newest ``created_at``.
"""
from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta
from pathlib import Path
from typing import Iterator, Optional, Protocol

import httpx
from pydantic import ValidationError

from .config import Settings
from .models import TrendSnapshot

FRESHNESS_WINDOW = timedelta(hours=6)

logger = logging.getLogger(__name__)


class SnapshotStore(Protocol):
    def latest(self) -> Optional[TrendSnapshot]:
        ...

    def append(self, snapshot: TrendSnapshot) -> None:
        ...


class JsonlSnapshotStore:
    """Snapshots stored one JSON document per line; the last valid line wins.

    Reads walk the file backwards in fixed-size blocks.
    """

    def __init__(self, path: Path, block_size: int = 8192):
        self.path = Path(path)
        self.block_size = block_size

    def _lines_from_end(self) -> Iterator[bytes]:
        with self.path.open("rb") as fp:
            position = fp.seek(0, os.SEEK_END)
            remainder = b""
            while position > 0:
                read_size = min(self.block_size, position)
                position -= read_size
                fp.seek(position)
                lines = (fp.read(read_size) + remainder).split(b"\n")
                remainder = lines.pop(0)
                yield from reversed(lines)
            yield remainder

    def latest(self) -> Optional[TrendSnapshot]:
        if not self.path.exists():
            return None

        for line in self._lines_from_end():
            if not line.strip():
                continue
            try:
                return TrendSnapshot.model_validate_json(line)
            except ValidationError as e:
                logger.warning(f"Skipping malformed cache line in {self.path}: {e}")
        return None

    def append(self, snapshot: TrendSnapshot) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as fp:
            fp.write(snapshot.model_dump_json(by_alias=True) + "\n")


class SupabaseSnapshotStore:
    """Snapshots stored as rows of a Supabase table through its REST API."""

    def __init__(
        self,
        url: str,
        key: str,
        table: str = "trend_cache",
        client: Optional[httpx.Client] = None,
    ):
        self.endpoint = f"{url.rstrip('/')}/rest/v1/{table}"
        self.headers = {
            "apikey": key,
            "Authorization": f"Bearer {key}",
            "Content-Type": "application/json",
        }
        self.client = client or httpx.Client(timeout=10.0)

    def latest(self) -> Optional[TrendSnapshot]:
        response = self.client.get(
            self.endpoint,
            params={"select": "topics,hashtags,created_at", "order": "created_at.desc", "limit": "1"},
            headers=self.headers,
        )
        response.raise_for_status()
        rows = response.json()
        if not rows:
            return None
        return TrendSnapshot.model_validate(rows[0])

    def append(self, snapshot: TrendSnapshot) -> None:
        response = self.client.post(
            self.endpoint,
            json=snapshot.model_dump(mode="json", by_alias=True),
            headers={**self.headers, "Prefer": "return=minimal"},
        )
        response.raise_for_status()


def build_store(settings: Settings) -> SnapshotStore:
    """Use Supabase when it is configured, otherwise the local JSONL file."""
    if settings.supabase_url and settings.supabase_key:
        return SupabaseSnapshotStore(settings.supabase_url, settings.supabase_key, settings.cache_table)
    return JsonlSnapshotStore(settings.cache_path)


class CacheReader:
    """Returns the latest snapshot while it is younger than the freshness window."""

    def __init__(self, store: SnapshotStore, window: timedelta = FRESHNESS_WINDOW):
        self.store = store
        self.window = window

    def read_fresh(self, now: datetime) -> Optional[TrendSnapshot]:
        try:
            snapshot = self.store.latest()
        except Exception as e:
            logger.warning(f"Cache read failed, recomputing trends: {e}")
            return None

        if snapshot is None:
            logger.info("Cache miss: no snapshot stored yet")
            return None

        hours_since_update = (now - snapshot.created_at).total_seconds() / 3600
        if hours_since_update < self.window.total_seconds() / 3600:
            logger.info(f"Cache hit: snapshot is {hours_since_update:.2f}h old")
            return snapshot

        logger.info(f"Cache miss: snapshot is {hours_since_update:.2f}h old")
        return None


class CacheWriter:
    """Appends snapshots; a failed write never fails the request."""

    def __init__(self, store: SnapshotStore):
        self.store = store

    def write(self, snapshot: TrendSnapshot) -> bool:
        try:
            self.store.append(snapshot)
        except Exception as e:
            logger.error(f"Cache write failed, returning uncached trends: {e}")
            return False
        return True
