"""Structured JSONL logging helpers."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional


def log_event(log_path: Optional[Path], event_type: str, payload: Dict[str, Any]) -> None:
    """Append a structured event to a JSONL log; a missing ``log_path`` disables logging."""
    if log_path is None:
        return
    record = {
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "event_type": event_type,
        "payload": payload,
    }
    log_path.parent.mkdir(parents=True, exist_ok=True)
    with log_path.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(record, ensure_ascii=True, sort_keys=True) + "\n")


def read_events(log_path: Path) -> List[Dict[str, Any]]:
    """Return the events recorded in a JSONL log, oldest first."""
    if not log_path.exists():
        return []
    with log_path.open("r", encoding="utf-8") as handle:
        return [json.loads(line) for line in handle if line.strip()]
