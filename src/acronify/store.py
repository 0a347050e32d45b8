"""
Record store for Acronify.

Keeps the record collection in memory and writes the whole collection to a
single storage slot after every change. Storage faults are logged and
swallowed: the session carries on in memory.
"""

import json
import logging
import random
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Mapping, Protocol

from pydantic import BaseModel

from acronify.config import DEFAULT_SLOT, ensure_dirs, load_config
from acronify.errors import NotFoundError
from acronify.latency import Latency
from acronify.models import Record

logger = logging.getLogger(__name__)

SEED_PATH = Path(__file__).parent / "data" / "seed.json"


class SlotStorage(Protocol):
    """Anything with localStorage-style get/set of text slots."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


def load_seed(path: Path = SEED_PATH) -> list[Record]:
    """Load the built-in record dataset."""
    with open(path, "r", encoding="utf-8") as f:
        return [Record.from_dict(item) for item in json.load(f)]


def dump_records(records: list[Record]) -> str:
    """Serialize records to the slot's JSON format."""
    return json.dumps([record.to_dict() for record in records], ensure_ascii=False)


def parse_records(text: str) -> list[Record]:
    """Parse the slot's JSON format. Raises on malformed content."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("stored collection is not a list")
    return [Record.from_dict(item) for item in data]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _coerce_id(record_id: Any) -> int:
    """
    Identifier as an int, via int().

    Strings must be whole integers: "2" and " 2 " match, "2.0" and "2abc"
    are not found rather than truncated to 2.
    """
    try:
        return int(record_id)
    except (TypeError, ValueError):
        raise NotFoundError(record_id) from None


def _fields(data: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
    """Caller fields as a plain dict, identifier keys removed."""
    if isinstance(data, BaseModel):
        fields = data.model_dump(by_alias=True, exclude_none=True)
    else:
        fields = dict(data)
    fields.pop("Id", None)
    fields.pop("id", None)
    return fields


class RecordStore:
    """CRUD over the saved acronyms and summaries."""

    def __init__(
        self,
        storage: SlotStorage | None,
        slot: str = DEFAULT_SLOT,
        seed: list[Record] | None = None,
        latency: Latency | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.storage = storage
        self.slot = slot
        self.latency = latency or Latency(0.2, 0.5)
        self.rng = rng or random.Random()
        self.clock = clock
        self._seed = seed
        self.data = self._load()

    @classmethod
    def from_snapshot(cls, text: str, **kwargs: Any) -> "RecordStore":
        """Build a memory-only store from a snapshot() string."""
        store = cls(None, seed=[], **kwargs)
        store.data = parse_records(text)
        return store

    def _seed_records(self) -> list[Record]:
        if self._seed is not None:
            return [record.model_copy(deep=True) for record in self._seed]
        return load_seed()

    def _load(self) -> list[Record]:
        """Read the slot, seeding it when empty."""
        if self.storage is None:
            return self._seed_records()

        try:
            stored = self.storage.get_item(self.slot)
            if stored:
                return parse_records(stored)
        except Exception as e:
            logger.warning(f"Failed to load records from slot '{self.slot}': {e}")
            return self._seed_records()

        records = self._seed_records()
        self._save(records)
        return records

    def _save(self, records: list[Record]) -> None:
        if self.storage is None:
            return
        try:
            self.storage.set_item(self.slot, dump_records(records))
        except Exception as e:
            logger.warning(f"Failed to save records to slot '{self.slot}': {e}")

    def _index_of(self, record_id: Any) -> int:
        target = _coerce_id(record_id)
        for index, record in enumerate(self.data):
            if record.id == target:
                return index
        raise NotFoundError(record_id)

    def snapshot(self) -> str:
        """Current collection in the slot's JSON format."""
        return dump_records(self.data)

    async def get_all(self) -> list[Record]:
        await self.latency.wait(self.rng)
        return [record.model_copy(deep=True) for record in self.data]

    async def get_by_id(self, record_id: Any) -> Record:
        await self.latency.wait(self.rng)
        return self.data[self._index_of(record_id)].model_copy(deep=True)

    async def create(self, fields: Mapping[str, Any] | BaseModel) -> Record:
        """
        Save a new record.

        Any identifier in fields is ignored; the new one is max(existing) + 1.
        createdAt is stamped now. New records go to the front.
        """
        await self.latency.wait(self.rng)

        max_id = max((record.id for record in self.data), default=0)
        payload = _fields(fields)
        payload["Id"] = max_id + 1
        payload.pop("created_at", None)
        payload["createdAt"] = self.clock()
        record = Record.from_dict(payload)

        self.data.insert(0, record)
        self._save(self.data)
        logger.debug(f"Created record {record.id} ({record.kind})")
        return record.model_copy(deep=True)

    async def update(self, record_id: Any, fields: Mapping[str, Any] | BaseModel) -> Record:
        """Replace a record's fields. The identifier cannot change."""
        await self.latency.wait(self.rng)

        index = self._index_of(record_id)
        payload = _fields(fields)
        payload["Id"] = self.data[index].id
        record = Record.from_dict(payload)

        self.data[index] = record
        self._save(self.data)
        return record.model_copy(deep=True)

    async def delete(self, record_id: Any) -> Record:
        await self.latency.wait(self.rng)

        index = self._index_of(record_id)
        record = self.data.pop(index)
        self._save(self.data)
        logger.debug(f"Deleted record {record.id}")
        return record.model_copy(deep=True)


def open_store(config: dict[str, Any] | None = None) -> RecordStore:
    """Record store on the configured slot database."""
    from acronify.db import Database

    config = config or load_config()
    store_config = config.get("store", {})
    ensure_dirs()

    return RecordStore(
        Database(),
        slot=store_config.get("slot", DEFAULT_SLOT),
        latency=Latency(
            store_config.get("min_latency", 0.2),
            store_config.get("max_latency", 0.5),
        ),
    )
