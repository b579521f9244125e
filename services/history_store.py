# services/history_store.py
import json
import logging
import os
import threading

from config import HISTORY_KEY
from models.result import Result

logger = logging.getLogger(__name__)


class HistoryStore:
    """
    Results of earlier sessions, kept on the local machine.

    The file is a small key-value store; the value under ``key`` is the
    JSON-serialized list of results, oldest first. The slot is read once and
    written back on every append.

    A file that is not a JSON object is moved aside to ``<path>.corrupt``
    before anything is written, so the other slots can still be recovered
    by hand. A file that cannot be read at all is never overwritten.
    """

    def __init__(self, path, key=HISTORY_KEY):
        self.path = path
        self.key = key
        self._results = None
        self._lock = threading.RLock()

    def _read_slots(self):
        if not os.path.exists(self.path):
            return {}

        # OSError propagates: writing over a file we could not read loses data
        with open(self.path, 'r', encoding='utf-8') as f:
            content = f.read()

        try:
            slots = json.loads(content)
        except ValueError as e:
            logger.error(f"History file {self.path} is not valid JSON: {e}")
            slots = None

        if isinstance(slots, dict):
            return slots

        backup_path = f"{self.path}.corrupt"
        os.replace(self.path, backup_path)
        logger.warning(f"Moved unreadable history file to {backup_path}")
        return {}

    def _write_slots(self, slots):
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)

        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(slots, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)

    def _load(self):
        if self._results is not None:
            return

        try:
            raw = self._read_slots().get(self.key)
        except OSError as e:
            logger.error(f"Could not read history file {self.path}: {e}")
            raw = None

        self._results = []
        if not raw:
            return

        try:
            entries = json.loads(raw)
            self._results = [Result.from_dict(entry) for entry in entries]
        except (ValueError, TypeError, AttributeError) as e:
            logger.error(f"Ignoring unreadable history under '{self.key}': {e}")
            self._results = []

        logger.info(f"Loaded {len(self._results)} results from history")

    def list(self):
        with self._lock:
            self._load()
            return list(self._results)

    def append(self, result):
        with self._lock:
            self._load()
            results = self._results + [result]

            slots = self._read_slots()
            slots[self.key] = json.dumps([r.to_dict() for r in results], ensure_ascii=False)
            self._write_slots(slots)

            self._results = results
            logger.debug(f"History now holds {len(results)} results")

    def clear(self):
        with self._lock:
            slots = self._read_slots()
            if self.key in slots:
                del slots[self.key]
                self._write_slots(slots)

            self._results = []
            logger.info("History cleared")
