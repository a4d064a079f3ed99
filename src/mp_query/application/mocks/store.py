"""Application mocks – InMemoryStore.

An explicitly owned, injectable record store backing simulated endpoints.
Callers construct one per dataset and hand it to the endpoints that serve
it, so no dataset lives in module-level state.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from mp_query.kernel.errors import ConflictError, NotFoundError, ValidationError
from mp_query.kernel.types.ids import normalize_id
from mp_query.observability.logging import get_logger

logger = get_logger(__name__)

Record = dict[str, Any]


class InMemoryStore:
    """Ordered record store keyed by the canonical form of ``id_field``.

    Stored records are copies; reads return copies. ``1`` and ``"1"`` address
    the same record.
    """

    def __init__(
        self,
        resource: str,
        id_field: str = "id",
        records: Iterable[Mapping[str, Any]] = (),
    ) -> None:
        self._resource = resource
        self._id_field = id_field
        self._records: dict[str, Record] = {}
        for record in records:
            self.add(record)

    @property
    def resource(self) -> str:
        return self._resource

    @property
    def id_field(self) -> str:
        return self._id_field

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return normalize_id(record_id) in self._records

    def _key(self, record: Mapping[str, Any]) -> str:
        key = normalize_id(record.get(self._id_field))
        if not key:
            raise ValidationError(
                f"{self._resource} record has no '{self._id_field}'",
                errors=[{"field": self._id_field, "error": "required"}],
            )
        return key

    def all(self) -> list[Record]:
        """Snapshot of every record, in store order."""
        return [dict(r) for r in self._records.values()]

    def get(self, record_id: Any) -> Record | None:
        found = self._records.get(normalize_id(record_id))
        return dict(found) if found is not None else None

    def get_or_raise(self, record_id: Any) -> Record:
        found = self.get(record_id)
        if found is None:
            raise NotFoundError(self._resource, normalize_id(record_id) or None)
        return found

    def add(self, record: Mapping[str, Any], *, prepend: bool = False) -> Record:
        """Insert *record*; ``prepend=True`` puts it first (newest-first lists)."""
        key = self._key(record)
        if key in self._records:
            raise ConflictError(
                f"{self._resource} '{key}' already exists",
                detail={"id": key},
            )
        stored = dict(record)
        if prepend:
            self._records = {key: stored, **self._records}
        else:
            self._records[key] = stored
        logger.debug("store.added", resource=self._resource, id=key)
        return dict(stored)

    def update(self, record_id: Any, changes: Mapping[str, Any]) -> Record:
        """Shallow-merge *changes* into a record; the id field is not changed."""
        key = normalize_id(record_id)
        current = self._records.get(key)
        if current is None:
            raise NotFoundError(self._resource, key or None)
        merged = {**current, **changes, self._id_field: current[self._id_field]}
        self._records[key] = merged
        logger.debug("store.updated", resource=self._resource, id=key, fields=sorted(changes))
        return dict(merged)

    def delete(self, record_id: Any) -> None:
        key = normalize_id(record_id)
        if self._records.pop(key, None) is None:
            raise NotFoundError(self._resource, key or None)
        logger.debug("store.deleted", resource=self._resource, id=key)


__all__ = ["InMemoryStore", "Record"]
