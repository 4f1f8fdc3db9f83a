from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Tip:
	title: str
	description: str


def tips_for_growth() -> List[Tip]:
	"""Static self-help tips shown with every result."""
	return [
		Tip(
			title='Gratitude journal (5 min)',
			description='Each evening, write down 3 things you are grateful for and why they matter.',
		),
		Tip(
			title='Gratitude letter',
			description='Write to someone who helped you; explain precisely the positive impact of what they did.',
		),
		Tip(
			title='Appreciation meditation',
			description='Breathe for 5 minutes while picturing a person or experience and feel the gratitude physically.',
		),
		Tip(
			title='Thank-you challenge',
			description='Every day, sincerely thank a different person and notice the effect.',
		),
	]
