"""JSON-file persistence for planning lists and the display currency.

This sits at the boundary: the ingestion and aggregation core never touches
it. Layout (relative to the data root, default ``./.budget``)::

    <data_root>/predictions.json   list of PlanningEntry objects
    <data_root>/incomes.json       list of PlanningEntry objects
    <data_root>/settings.json      {"currency": "BRL"}

Loading is tolerant: a missing file, unreadable JSON or a non-list payload
loads as an empty list, and individual entries that fail validation are
dropped with a warning. Writes go to ``.tmp`` first and are then
``os.replace``-d into place.
"""

from __future__ import annotations

import contextlib
import json
import os
from collections.abc import Sequence
from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .currency import default_currency, normalize_currency
from .logging_setup import get_logger
from .models import PlanningEntry

_logger = get_logger("budget_analysis.storage")


class EntryKind(StrEnum):
    PREDICTION = "prediction"
    INCOME = "income"


_FILENAMES: dict[EntryKind, str] = {
    EntryKind.PREDICTION: "predictions.json",
    EntryKind.INCOME: "incomes.json",
}


class StoredSettings(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    currency: str

    @field_validator("currency")
    @classmethod
    def _supported_currency(cls, v: str) -> str:
        return normalize_currency(v)


def get_data_root() -> Path:
    """Return the data directory.

    Default: ``./.budget`` under the current working directory.
    Override: ``BA_DATA_DIR`` environment variable (absolute or relative).
    """

    root = os.getenv("BA_DATA_DIR")
    if root and root.strip():
        return Path(root).expanduser().resolve()
    return (Path.cwd() / ".budget").resolve()


def _write_json_atomic(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        os.replace(tmp, path)
    except Exception:
        with contextlib.suppress(FileNotFoundError):
            tmp.unlink()
        raise


def _read_json(path: Path) -> Any | None:
    if not path.exists():
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        _logger.warning("storage:read_failed; treating as empty path=%s", os.fspath(path))
        return None


class PlanningStore:
    """Load and save planning lists under a data root."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = root if root is not None else get_data_root()

    def _path(self, kind: EntryKind) -> Path:
        return self.root / _FILENAMES[kind]

    def load(self, kind: EntryKind) -> list[PlanningEntry]:
        path = self._path(kind)
        raw = _read_json(path)
        if raw is None:
            return []
        if not isinstance(raw, list):
            _logger.warning(
                "storage:not_a_list; treating as empty kind=%s path=%s", kind, os.fspath(path)
            )
            return []

        entries: list[PlanningEntry] = []
        for pos, item in enumerate(raw):
            try:
                entries.append(PlanningEntry.model_validate(item))
            except ValidationError as e:
                _logger.warning(
                    "storage:invalid_entry dropped kind=%s pos=%d errors=%d",
                    kind,
                    pos,
                    e.error_count(),
                )
        return entries

    def save(self, kind: EntryKind, entries: Sequence[PlanningEntry]) -> None:
        _write_json_atomic(self._path(kind), [e.model_dump(mode="json") for e in entries])
        _logger.debug("storage:saved kind=%s count=%d", kind, len(entries))

    def load_currency(self) -> str:
        raw = _read_json(self.root / "settings.json")
        if isinstance(raw, dict):
            try:
                return StoredSettings.model_validate(raw).currency
            except ValidationError:
                _logger.warning("storage:invalid_settings; using default currency")
        return default_currency()

    def save_currency(self, currency: str) -> str:
        settings = StoredSettings(currency=currency)
        _write_json_atomic(self.root / "settings.json", settings.model_dump(mode="json"))
        return settings.currency


__all__ = ["EntryKind", "PlanningStore", "StoredSettings", "get_data_root"]
