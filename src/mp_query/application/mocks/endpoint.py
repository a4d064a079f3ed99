"""Application mocks – ListEndpoint.

Simulates one backend resource over an :class:`InMemoryStore`: list with the
query engine, read one, create, update, delete. Identifier fields are
normalized on the way out so responses carry string ids regardless of how
the seed data spelled them.
"""
from __future__ import annotations

import uuid
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

from mp_query.application.mocks.store import InMemoryStore, Record
from mp_query.application.search import EngineConfig, QueryEngine, QueryResult
from mp_query.kernel.errors import NotFoundError
from mp_query.kernel.types.ids import normalize_id, normalize_id_fields

Enricher = Callable[[Record], Mapping[str, Any]]
Action = Callable[[Record, Mapping[str, Any]], Mapping[str, Any] | None]


def _generate_id(resource: str) -> str:
    return f"{resource}-{uuid.uuid4().hex[:12]}"


def _utc_now_iso() -> str:
    """Current UTC time as ``2024-01-10T08:30:00.000Z``."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def set_fields(**values: Any) -> Action:
    """Action that assigns fixed *values*, e.g. ``set_fields(status="APPROVED")``."""
    def action(record: Record, payload: Mapping[str, Any]) -> Mapping[str, Any]:
        return dict(values)
    return action


class ListEndpoint:
    """One simulated resource.

    Args:
        store: Records served by this endpoint.
        config: Search / date configuration for list queries.
        id_fields: Fields normalized with :func:`normalize_id` before
            filtering and in every response. The store's id field is always
            included.
        enrich: Optional callback returning extra (joined or synthetic)
            fields merged into each row before list filtering, e.g. a
            department name looked up from a cost-center id.
        engine: Query engine; a default-settings engine when omitted.
        touch_field: When set, updates and record actions that change a
            record also stamp this field with the current UTC time
            (``"updated_at"`` in the usual backend shape).

    Record actions (``POST /<prefix>/<id>/<action>`` on a router) are
    added with :meth:`register_action`.
    """

    def __init__(
        self,
        store: InMemoryStore,
        config: EngineConfig | None = None,
        *,
        id_fields: tuple[str, ...] = (),
        enrich: Enricher | None = None,
        engine: QueryEngine[Record] | None = None,
        touch_field: str | None = None,
    ) -> None:
        self._store = store
        self._config = config or EngineConfig()
        self._id_fields = tuple(dict.fromkeys((store.id_field, *id_fields)))
        self._enrich = enrich
        self._engine = engine or QueryEngine()
        self._touch_field = touch_field
        self._actions: dict[str, tuple[Action, str]] = {}

    @property
    def store(self) -> InMemoryStore:
        return self._store

    def _sanitize(self, record: Record) -> Record:
        return normalize_id_fields(record, self._id_fields)

    def _row(self, record: Record) -> Record:
        row = self._sanitize(record)
        if self._enrich is not None:
            row = {**row, **self._enrich(row)}
        return row

    def list(self, params: Mapping[str, Any] | None = None) -> QueryResult[Record]:
        rows = [self._row(r) for r in self._store.all()]
        return self._engine.query(rows, params or {}, self._config)

    def detail(self, record_id: Any) -> Record:
        return self._sanitize(self._store.get_or_raise(record_id))

    def create(self, payload: Mapping[str, Any], *, prepend: bool = True) -> Record:
        """Store *payload* as a new record, generating an id when it has none."""
        record = dict(payload)
        if not normalize_id(record.get(self._store.id_field)):
            record[self._store.id_field] = _generate_id(self._store.resource)
        return self._sanitize(self._store.add(record, prepend=prepend))

    def _touched(self, changes: Mapping[str, Any]) -> dict[str, Any]:
        if self._touch_field is None:
            return dict(changes)
        return {**changes, self._touch_field: _utc_now_iso()}

    def update(self, record_id: Any, changes: Mapping[str, Any]) -> Record:
        return self._sanitize(self._store.update(record_id, self._touched(changes)))

    def delete(self, record_id: Any) -> None:
        self._store.delete(record_id)

    def register_action(self, name: str, action: Action, *, message: str | None = None) -> None:
        """Add a named record action such as ``submit`` or ``approve``.

        *action* receives a copy of the record and the request payload and
        returns the fields to change (or ``None`` for no change). *message*
        is echoed in the response body.
        """
        self._actions[name] = (action, message or f"{name} succeeded")

    def actions(self) -> list[str]:
        return sorted(self._actions)

    def run_action(
        self,
        record_id: Any,
        name: str,
        payload: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Run action *name* on a record and return ``{"success", "message", ...}``.

        The changed fields are included in the body. Raises
        :class:`NotFoundError` for an unknown action or record.
        """
        if name not in self._actions:
            raise NotFoundError(f"{self._store.resource} action", name)
        action, message = self._actions[name]
        record = self._sanitize(self._store.get_or_raise(record_id))
        changes = dict(action(record, payload or {}) or {})
        if changes:
            self._store.update(record_id, self._touched(changes))
        return {"success": True, "message": message, **changes}


__all__ = ["Action", "Enricher", "ListEndpoint", "set_fields"]
