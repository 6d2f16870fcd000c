"""JSON utilities with numpy, enum and pydantic support."""

from __future__ import annotations

from enum import Enum
import json
from pathlib import Path
from typing import Any

import numpy as np
from pydantic import BaseModel


def _json_default(obj: Any) -> Any:
    """JSON serializer for types not supported by default.

    Handles:
    - pydantic models -> dict
    - Enum members -> value
    - pathlib.Path -> str
    - numpy scalars -> Python scalars
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Path):
        return str(obj)

    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)

    return str(obj)


def dumps(obj: Any) -> str:
    """Serialize an object (models included) to pretty-printed JSON."""
    return json.dumps(obj, indent=2, ensure_ascii=False, default=_json_default)


def read_json(path: str | Path) -> dict[str, Any]:
    """Read and parse JSON file.

    Args:
        path: Input file path

    Returns:
        Parsed JSON as dictionary
    """
    data: Any = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object, got {type(data).__name__}")
    return data
