import json
from pathlib import Path
from typing import Any, Dict, Union


def load_payload(path: Union[str, Path]) -> Dict[str, Any]:
    target = Path(path).expanduser().resolve()
    if target.suffix.lower() != ".json":
        raise ValueError("Only .json inputs are supported")
    with open(target, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError("payload must be a JSON object")
    return data


def rejected(reason: str) -> Dict[str, str]:
    return {
        "status": "rejected",
        "reason": reason,
        "safe_action": "no_score_generated",
    }
