import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

from services.storage import AnswerStore, JSONStore  # noqa: E402


@pytest.fixture
def answer_store(tmp_path: Path) -> AnswerStore:
	return AnswerStore(JSONStore(str(tmp_path / 'state.json')))
