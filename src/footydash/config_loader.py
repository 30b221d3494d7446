"""Persist and load crest id profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from footydash.config import DEFAULT_CREST_TABLE, CrestTable


@dataclass
class CrestProfile:
    crest_ids: Dict[str, str]

    @classmethod
    def load(cls, path: Path) -> "CrestProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"crest profile {path} must be a JSON object")
        raw_ids = data.get("crest_ids", {})
        if not isinstance(raw_ids, dict):
            raise ValueError(f"crest profile {path}: 'crest_ids' must be an object")
        crest_ids: Dict[str, str] = {}
        for name, value in raw_ids.items():
            if isinstance(value, bool) or not isinstance(value, (str, int)):
                raise ValueError(f"crest profile {path}: crest id for {name!r} must be a string or integer")
            crest_ids[str(name)] = str(value)
        return cls(crest_ids=crest_ids)

    def save(self, path: Path) -> None:
        payload = {"crest_ids": self.crest_ids}
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def apply(self, base: CrestTable = DEFAULT_CREST_TABLE) -> CrestTable:
        return base.extend(self.crest_ids)


def load_crest_table(path: Path | None) -> CrestTable:
    """Return the default table, extended by the profile at ``path`` if given."""

    if path is None:
        return DEFAULT_CREST_TABLE
    return CrestProfile.load(path).apply()
