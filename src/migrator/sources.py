# migrator/sources.py
"""
Legacy data sources.

The migration reads each legacy collection wholesale before it writes
anything. A data source only has to return the raw records of a named
collection; parsing into typed records happens in ``load_snapshot``.
"""

import json
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from migrator.exceptions import LegacyDataSourceError
from migrator.models.choices import (
    LEGACY_ASSIGNMENTS,
    LEGACY_RELOADS,
    LEGACY_SUBSCRIPTIONS,
    LEGACY_USERS,
)
from migrator.models.legacy import (
    LegacyAssignment,
    LegacyReload,
    LegacySubscription,
    LegacyUser,
)


class LegacyDataSource(ABC):
    """Provides the raw records of a legacy collection."""

    @abstractmethod
    def load_collection(self, name: str) -> list[dict[str, Any]]:
        """
        Load every record of a legacy collection, in file order.

        Raises:
            LegacyDataSourceError: If the collection cannot be read
        """
        pass


class JsonDirectoryDataSource(LegacyDataSource):
    """Reads ``<directory>/<name>.json`` files holding a JSON array of records."""

    def __init__(self, directory: str | Path, file_names: dict[str, str] | None = None):
        self.directory = Path(directory)
        self.file_names = file_names or {}

    def path_for(self, name: str) -> Path:
        return self.directory / self.file_names.get(name, f"{name}.json")

    def load_collection(self, name: str) -> list[dict[str, Any]]:
        path = self.path_for(name)
        try:
            with path.open(encoding="utf-8") as fp:
                records = json.load(fp)
        except FileNotFoundError as e:
            raise LegacyDataSourceError(
                message=f"Legacy collection file not found: {path}",
                details={"collection": name, "path": str(path)},
            ) from e
        except json.JSONDecodeError as e:
            raise LegacyDataSourceError(
                message=f"Legacy collection file is not valid JSON: {path} ({e})",
                details={"collection": name, "path": str(path)},
            ) from e

        if not isinstance(records, list):
            raise LegacyDataSourceError(
                message=f"Legacy collection file must hold a JSON array: {path}",
                details={"collection": name, "path": str(path)},
            )
        return records


class InMemoryDataSource(LegacyDataSource):
    """Serves records held in memory; unknown collections are empty."""

    def __init__(self, collections: dict[str, Iterable[dict[str, Any]]] | None = None):
        self.collections = {
            name: list(records) for name, records in (collections or {}).items()
        }

    def load_collection(self, name: str) -> list[dict[str, Any]]:
        return [dict(record) for record in self.collections.get(name, [])]


@dataclass
class LegacySnapshot:
    """Typed, fully loaded copy of the four legacy collections."""

    users: list[LegacyUser]
    assignments: list[LegacyAssignment]
    reloads: list[LegacyReload]
    subscriptions: list[LegacySubscription]


def load_users(source: LegacyDataSource) -> list[LegacyUser]:
    return [LegacyUser.from_dict(r) for r in source.load_collection(LEGACY_USERS)]


def load_snapshot(source: LegacyDataSource) -> LegacySnapshot:
    return LegacySnapshot(
        users=load_users(source),
        assignments=[
            LegacyAssignment.from_dict(r)
            for r in source.load_collection(LEGACY_ASSIGNMENTS)
        ],
        reloads=[
            LegacyReload.from_dict(r) for r in source.load_collection(LEGACY_RELOADS)
        ],
        subscriptions=[
            LegacySubscription.from_dict(r)
            for r in source.load_collection(LEGACY_SUBSCRIPTIONS)
        ],
    )
