# cityfinder/storage/events.py
import json
import logging
import os
import time
from typing import Any, Dict, List

from cityfinder.config import settings

logger = logging.getLogger(__name__)


def _log_file() -> str:
    return os.path.join(settings.data_dir, "events.log.jsonl")


def _ensure():
    os.makedirs(settings.data_dir, exist_ok=True)


def append_log(event: Dict[str, Any]) -> None:
    _ensure()
    path = _log_file()
    event = {"ts": time.time(), **event}
    # rotate if too big
    if os.path.exists(path) and os.path.getsize(path) > settings.events_max_bytes:
        os.replace(path, path + ".1")
    with open(path, "a", encoding="utf-8") as f:
        f.write(json.dumps(event, ensure_ascii=False) + "\n")


def record_event(event: Dict[str, Any]) -> bool:
    """append_log for error paths: a log that cannot be written is reported, never raised."""
    try:
        append_log(event)
        return True
    except OSError as e:
        logger.warning("event log unavailable (%s), dropped %s", e, event)
        return False


def read_recent(limit: int = 200, *, type: str | None = None) -> List[Dict[str, Any]]:
    path = _log_file()
    if not os.path.exists(path):
        return []
    out: List[Dict[str, Any]] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                event = json.loads(line)
            except ValueError:
                continue  # torn write
            if type is None or event.get("type") == type:
                out.append(event)
    return out[-limit:]
