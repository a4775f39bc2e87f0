"""Record fetching collaborators used by data grids."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from django.db import connections

log = logging.getLogger(__name__)


class RecordSource(ABC):
    """Executes finished SQL and returns rows as dicts keyed by column alias."""

    @abstractmethod
    def fetch(
        self, sql: str, params: Sequence[Any], limit: Optional[int] = None, offset: int = 0
    ) -> List[Dict[str, Any]]:
        raise NotImplementedError

    @abstractmethod
    def count(self, sql: str, params: Sequence[Any]) -> int:
        raise NotImplementedError

    def quote_name(self, name: str) -> str:
        return f'"{name}"'


class SqlRecordSource(RecordSource):
    """Runs queries on one of the project's database connections."""

    def __init__(self, using: str = "default"):
        self.using = using

    @property
    def connection(self):
        return connections[self.using]

    def quote_name(self, name: str) -> str:
        return self.connection.ops.quote_name(name)

    def fetch(self, sql, params, limit=None, offset=0):
        params = list(params)
        if limit is not None:
            sql = f"{sql} LIMIT %s OFFSET %s"
            params += [limit, offset]
        log.debug("Fetching dash records: %s %s", sql, params)
        with self.connection.cursor() as cursor:
            cursor.execute(sql, params)
            columns = [col[0] for col in cursor.description]
            return [dict(zip(columns, row)) for row in cursor.fetchall()]

    def count(self, sql, params):
        with self.connection.cursor() as cursor:
            cursor.execute(f"SELECT COUNT(*) FROM ({sql}) dash_count", list(params))
            return cursor.fetchone()[0]


class RecordSet:
    """Lazy, sliceable view over a query, suitable for Django's ``Paginator``."""

    def __init__(self, source: RecordSource, sql: str, params: Sequence[Any], count_sql: str = ""):
        self.source = source
        self.sql = sql
        self.params = list(params)
        self.count_sql = count_sql or sql
        self._count = None

    def count(self):
        if self._count is None:
            self._count = self.source.count(self.count_sql, self.params)
        return self._count

    def __len__(self):
        return self.count()

    def __getitem__(self, key):
        if isinstance(key, slice):
            start = key.start or 0
            limit = None if key.stop is None else max(key.stop - start, 0)
            return self.source.fetch(self.sql, self.params, limit=limit, offset=start)
        return self[key:key + 1][0]
