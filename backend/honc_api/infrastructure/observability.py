"""Log setup for the API process.

Two output modes, chosen by LOG_FORMAT: one JSON object per line for log
shippers, or a plain single-line format for local runs. Request-scoped
values passed via `extra=` (error_code, path, user_id, call_sid) become
top-level JSON keys.
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_KEYS = ("error_code", "path", "user_id", "call_sid")


class JSONFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, record.__dict__[key]) for key in _EXTRA_KEYS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json"
        else logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"),
    )
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
