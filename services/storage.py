import json
import logging
import os
import threading
from typing import Any, Dict, List, Optional

from data.questions import is_likert_value

logger = logging.getLogger(__name__)

STORAGE_KEY = 'gratitude-test-v1'


class JSONStore:
	"""Key-value store backed by a single JSON object on disk.

	Values are kept as already-encoded JSON strings, one per key.
	"""

	def __init__(self, path: str) -> None:
		self.path = path
		self._lock = threading.Lock()

	def read(self) -> Dict[str, Any]:
		with self._lock:
			return self._read()

	def write(self, data: Dict[str, Any]) -> None:
		with self._lock:
			self._write(data)

	def get_item(self, key: str) -> Optional[str]:
		value = self.read().get(key)
		return value if isinstance(value, str) else None

	def set_item(self, key: str, value: str) -> None:
		# held across the whole read-modify-write
		with self._lock:
			data = self._read()
			data[key] = value
			self._write(data)

	def _read(self) -> Dict[str, Any]:
		try:
			with open(self.path, 'r', encoding='utf-8') as f:
				data = json.load(f)
		except FileNotFoundError:
			return {}
		except (OSError, ValueError) as e:
			logger.warning("could not read %s: %s", self.path, e)
			return {}
		return data if isinstance(data, dict) else {}

	def _write(self, data: Dict[str, Any]) -> None:
		directory = os.path.dirname(self.path)
		if directory:
			os.makedirs(directory, exist_ok=True)
		with open(self.path, 'w', encoding='utf-8') as f:
			json.dump(data, f, ensure_ascii=False, indent=2)


def encode_answers(answers: List[Optional[int]]) -> str:
	return json.dumps(list(answers))


def decode_answers(raw: Optional[str], size: int) -> List[Optional[int]]:
	"""Parse a persisted answer array, falling back to all-unanswered on anything unexpected."""
	default: List[Optional[int]] = [None] * size
	if not raw:
		return default
	try:
		parsed = json.loads(raw)
	except ValueError:
		logger.warning("discarding corrupt persisted answers")
		return default
	if not isinstance(parsed, list) or len(parsed) != size:
		logger.warning("discarding persisted answers with unexpected shape")
		return default
	if not all(a is None or is_likert_value(a) for a in parsed):
		logger.warning("discarding persisted answers with out-of-range values")
		return default
	return parsed


class AnswerStore:
	"""Best-effort load/save of the answer array under a fixed key."""

	def __init__(self, store: JSONStore, key: str = STORAGE_KEY) -> None:
		self.store = store
		self.key = key

	def read_raw(self) -> Optional[str]:
		try:
			return self.store.get_item(self.key)
		except Exception as e:
			logger.warning("answer store unavailable, starting fresh: %s", e)
			return None

	def write_raw(self, raw: str) -> bool:
		try:
			self.store.set_item(self.key, raw)
		except Exception as e:
			# Write failures are not surfaced to the user.
			logger.warning("could not persist answers: %s", e)
			return False
		return True

	def load(self, size: int) -> List[Optional[int]]:
		return decode_answers(self.read_raw(), size)

	def save(self, answers: List[Optional[int]]) -> bool:
		return self.write_raw(encode_answers(answers))
