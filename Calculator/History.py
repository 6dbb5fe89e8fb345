# History.py
"""""
Persistence of successful evaluations, keyed by an opaque user identifier.

Entries live in one JSON file shaped {user_id: [entry, ...]}, newest first.
Each entry stores the expression, the result as a string, the angle mode and
an ISO-8601 timestamp.
"""""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from . import error as E
from .ScientificEngine import format_number

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 50
MAX_LIMIT = 100
MAX_ENTRIES_PER_USER = 100


def check_limit(limit):
    if isinstance(limit, bool) or not isinstance(limit, int) or not 1 <= limit <= MAX_LIMIT:
        raise ValueError(f"limit must be an integer between 1 and {MAX_LIMIT}, got {limit!r}")
    return limit


class HistoryStore:
    def __init__(self, path):
        self.path = Path(path)
        self.lock = threading.Lock()

    def load(self):
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as e:
            raise E.HistoryError(f"History file {self.path} is corrupt: {e}", code="6001")

        if not isinstance(data, dict):
            raise E.HistoryError(f"History file {self.path} is corrupt: expected an object", code="6001")
        return data

    def save(self, data):
        """Write through a temporary file so a crash never leaves half a file behind."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(dir=self.path.parent, prefix=self.path.name, suffix=".tmp")
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=4)
            os.replace(temp_path, self.path)
        except OSError as e:
            raise E.HistoryError(f"History could not be saved: {e}", code="6002")

    def record(self, user_id, evaluation):
        """Store a successful evaluation for user_id and return the stored entry."""
        entry = {
            "user_id": str(user_id),
            "expression": evaluation.expression,
            "result": format_number(evaluation.result),
            "mode": evaluation.mode.value,
            "timestamp": evaluation.timestamp.isoformat(),
        }
        with self.lock:
            data = self.load()
            entries = data.get(str(user_id), [])
            entries.insert(0, entry)
            data[str(user_id)] = entries[:MAX_ENTRIES_PER_USER]
            self.save(data)

        logger.debug("Recorded %r for user %s", evaluation.expression, user_id)
        return entry

    def get_history(self, user_id, limit=DEFAULT_LIMIT):
        """Return up to `limit` entries for user_id, newest first."""
        check_limit(limit)
        with self.lock:
            data = self.load()
        return data.get(str(user_id), [])[:limit]

    def clear_history(self, user_id):
        with self.lock:
            data = self.load()
            if data.pop(str(user_id), None) is not None:
                self.save(data)
        logger.info("Cleared history of user %s", user_id)
