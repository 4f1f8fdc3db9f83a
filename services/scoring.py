from dataclasses import dataclass
from typing import Dict, List, Literal, Optional, Sequence

Tone = Literal['success', 'warn', 'danger']


@dataclass(frozen=True)
class Band:
	label: str
	tone: Tone
	message: str
	min_score: Optional[int] = None

	def snapshot(self) -> Dict[str, str]:
		return {"label": self.label, "tone": self.tone, "message": self.message}


GRATITUDE_ORIENTED = Band(
	label='Gratitude-oriented',
	tone='success',
	message='You naturally practise gratitude.',
	min_score=20,
)
DEVELOPING = Band(
	label='Developing',
	tone='warn',
	message='You have a solid base to build on.',
	min_score=15,
)
INGRATITUDE_LEANING = Band(
	label='Ingratitude-leaning',
	tone='danger',
	message='Working on your sense of gratitude would be beneficial.',
)

# Highest first; the last band has no lower bound and catches everything else.
BANDS: List[Band] = [GRATITUDE_ORIENTED, DEVELOPING, INGRATITUDE_LEANING]


def classify(score: int) -> Band:
	for band in BANDS[:-1]:
		if band.min_score is not None and score >= band.min_score:
			return band
	return BANDS[-1]


def total_score(answers: Sequence[Optional[int]]) -> int:
	"""Raw sum of the answered slots; unanswered slots count as 0.

	Completion is not checked here. Callers gate result display on it separately.
	"""
	return sum(a for a in answers if a is not None)
