# migrator/services/export_service.py
"""
Export of document store collections to flat files.

Produces the JSON arrays the migration reads as legacy input, or CSV for
inspection in a spreadsheet. Every record carries its document id under
``docId``.
"""

import csv
import json
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

from migrator.models.documents import DocumentRef
from migrator.providers.base import DocumentStore
from migratorutils.logging import get_logger

logger = get_logger(__name__)

EXPORT_FORMATS = ("json", "csv")


def _json_default(value: Any) -> Any:
    if isinstance(value, DocumentRef):
        return value.path
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _csv_cell(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=_json_default)
    if isinstance(value, (DocumentRef, datetime, date, Decimal)):
        return _json_default(value)
    return value


class CollectionExporter:
    """Writes a collection to ``<output_dir>/<collection>.<format>``."""

    def __init__(self, store: DocumentStore, output_dir: str | Path):
        self.store = store
        self.output_dir = Path(output_dir)

    def export(self, collection: str, format: str = "json") -> Path:
        if format not in EXPORT_FORMATS:
            raise ValueError(
                f"Unsupported export format '{format}'. "
                f"Use one of: {', '.join(EXPORT_FORMATS)}"
            )

        records = self.store.stream_collection(collection)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / f"{collection}.{format}"

        if format == "json":
            self._write_json(path, records)
        else:
            self._write_csv(path, records)

        logger.info(
            "collection_exported",
            collection=collection,
            records=len(records),
            path=str(path),
        )
        return path

    @staticmethod
    def _write_json(path: Path, records: list[dict[str, Any]]) -> None:
        with path.open("w", encoding="utf-8") as fp:
            json.dump(records, fp, indent=2, default=_json_default)

    @staticmethod
    def _write_csv(path: Path, records: list[dict[str, Any]]) -> None:
        fieldnames: list[str] = []
        for record in records:
            for key in record:
                if key not in fieldnames:
                    fieldnames.append(key)

        with path.open("w", encoding="utf-8", newline="") as fp:
            writer = csv.DictWriter(fp, fieldnames=fieldnames)
            writer.writeheader()
            for record in records:
                writer.writerow({key: _csv_cell(value) for key, value in record.items()})
