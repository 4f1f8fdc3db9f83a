import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from data.questions import Question, is_likert_value, load_questions
from services.scoring import Band, classify, total_score
from services.storage import decode_answers, encode_answers

logger = logging.getLogger(__name__)

SUMMARY_HEADER = 'Gratitude Test - Results'
EXPORT_PREFIX = 'gratitude-result-'
UNANSWERED_PLACEHOLDER = '-'


class QuizModel:
	"""Answer set for one quiz session plus everything derived from it.

	The answer list always holds exactly one slot per question; a slot is either
	None (unanswered) or a Likert value 1-5.
	"""

	def __init__(self, questions: Optional[List[Question]] = None, answers: Optional[List[Optional[int]]] = None) -> None:
		self.questions: List[Question] = questions if questions is not None else load_questions()
		self.answers: List[Optional[int]] = [None] * len(self.questions)
		if answers is not None:
			if len(answers) != len(self.questions):
				raise ValueError(f"expected {len(self.questions)} answers, got {len(answers)}")
			for i, value in enumerate(answers):
				if value is not None:
					self.set_answer(i, value)

	@property
	def size(self) -> int:
		return len(self.questions)

	def set_answer(self, index: int, value: int) -> None:
		if not 0 <= index < self.size:
			raise ValueError(f"question index out of range: {index}")
		if not is_likert_value(value):
			raise ValueError(f"not a Likert value: {value!r}")
		self.answers[index] = value
		logger.debug("answer %d set to %d", index, value)

	def reset(self) -> None:
		self.answers = [None] * self.size

	def answered_count(self) -> int:
		return sum(1 for a in self.answers if a is not None)

	def is_complete(self) -> bool:
		return self.answered_count() == self.size

	def score(self) -> int:
		return total_score(self.answers)

	def max_score(self) -> int:
		return 5 * self.size

	def profile(self) -> Band:
		return classify(self.score())

	def progress_percent(self) -> int:
		if self.size == 0:
			return 100
		return min(100, round(self.answered_count() / self.size * 100))

	def to_summary_text(self) -> str:
		lines = [
			SUMMARY_HEADER,
			f"Score: {self.score()} / {self.max_score()}",
			f"Profile: {self.profile().label}",
			'',
		]
		for i, q in enumerate(self.questions):
			answer = self.answers[i]
			shown = UNANSWERED_PLACEHOLDER if answer is None else str(answer)
			lines.append(f"Q{i + 1}. {q.prompt}\n→ Answer: {shown}")
		return '\n'.join(lines)

	def to_export_payload(self, now: Optional[datetime] = None) -> Dict[str, Any]:
		return {
			"score": self.score(),
			"profile": self.profile().label,
			"answers": list(self.answers),
			"timestamp": iso_timestamp(now or utcnow()),
		}

	def to_persisted(self) -> str:
		return encode_answers(self.answers)

	@classmethod
	def from_persisted(cls, raw: Optional[str], questions: Optional[List[Question]] = None) -> 'QuizModel':
		qs = questions if questions is not None else load_questions()
		return cls(questions=qs, answers=decode_answers(raw, len(qs)))


def utcnow() -> datetime:
	return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime) -> str:
	if moment.tzinfo is None:
		moment = moment.replace(tzinfo=timezone.utc)
	return moment.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def export_filename(moment: datetime) -> str:
	if moment.tzinfo is None:
		moment = moment.replace(tzinfo=timezone.utc)
	millis = int(moment.timestamp()) * 1000 + moment.microsecond // 1000
	return f"{EXPORT_PREFIX}{millis}.json"
