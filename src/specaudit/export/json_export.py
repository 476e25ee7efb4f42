"""JSON export: pydantic serialization with a small envelope."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel


def export_json(result: BaseModel, feature_name: str = "") -> str:
    """Serialize a result model, tagged with its feature name."""
    payload: dict[str, Any] = {
        "feature": feature_name,
        "result": result.model_dump(mode="json"),
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)
