"""JSON file helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_json(path: str | Path) -> Any:
    """Read and parse a UTF-8 JSON file.

    Raises:
        json.JSONDecodeError: If the content is not valid JSON (a ValueError)
    """
    with Path(path).open("r", encoding="utf-8") as f:
        return json.load(f)
