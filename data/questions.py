from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Question:
	id: str
	prompt: str


@dataclass(frozen=True)
class LikertOption:
	value: int
	label: str


LIKERT_MIN = 1
LIKERT_MAX = 5

LIKERT: List[LikertOption] = [
	LikertOption(value=1, label='Never'),
	LikertOption(value=2, label='Rarely'),
	LikertOption(value=3, label='Sometimes'),
	LikertOption(value=4, label='Often'),
	LikertOption(value=5, label='Always'),
]

QUESTIONS: List[Question] = [
	Question(id='says_thanks', prompt='How many times a week do you sincerely say "thank you"?'),
	Question(id='notices_effort', prompt='Do you easily notice when someone makes an effort for you?'),
	Question(id='finds_positives', prompt='Do you easily find positive things in your day?'),
	Question(id='returns_favours', prompt='Do you naturally return the favour when someone helps you?'),
	Question(id='remembers_kindness', prompt='Do you easily remember the kind gestures others have made towards you?'),
]


def load_questions() -> List[Question]:
	return list(QUESTIONS)


def is_likert_value(value: object) -> bool:
	# bool is an int subclass; True must not pass as 1
	return isinstance(value, int) and not isinstance(value, bool) and LIKERT_MIN <= value <= LIKERT_MAX
