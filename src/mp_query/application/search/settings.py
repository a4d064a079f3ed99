"""Application search – QueryEngineSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_query.application.pagination.page_request import DEFAULT_LIMIT
from mp_query.config.settings import EnvSettingsLoader, Settings
from mp_query.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class QueryEngineSettings(Settings):
    """Tunables for :class:`~mp_query.application.search.service.QueryEngine`.

    Read from ``MP_QUERY_DEFAULT_LIMIT``, ``MP_QUERY_MAX_LIMIT`` and
    ``MP_QUERY_DEBUG_LOG`` by :meth:`from_env`. ``max_limit = 0`` leaves the
    page size unbounded.
    """

    _prefix: ClassVar[str] = "MP_QUERY"

    default_limit: int = DEFAULT_LIMIT
    max_limit: int = 0
    debug_log: bool = True

    def _validate(self) -> None:
        if self.default_limit < 1:
            raise InvalidSettingValueError("default_limit", self.default_limit, "must be >= 1")
        if self.max_limit < 0:
            raise InvalidSettingValueError("max_limit", self.max_limit, "must be >= 0")

    @classmethod
    def from_env(cls) -> "QueryEngineSettings":
        return EnvSettingsLoader().load(cls)


__all__ = ["QueryEngineSettings"]
