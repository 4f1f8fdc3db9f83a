import pytest

from services.scoring import BANDS, DEVELOPING, GRATITUDE_ORIENTED, INGRATITUDE_LEANING, classify, total_score


@pytest.mark.parametrize(
	("score", "expected"),
	[
		(-3, INGRATITUDE_LEANING),
		(0, INGRATITUDE_LEANING),
		(14, INGRATITUDE_LEANING),
		(15, DEVELOPING),
		(19, DEVELOPING),
		(20, GRATITUDE_ORIENTED),
		(25, GRATITUDE_ORIENTED),
		(1000, GRATITUDE_ORIENTED),
	],
)
def test_classify_band_boundaries(score: int, expected) -> None:
	assert classify(score) is expected


def test_bands_partition_without_gaps() -> None:
	labels = [classify(s).label for s in range(-50, 100)]
	assert set(labels) == {b.label for b in BANDS}
	# ordered lowest to highest once each, no band reappears after being left
	transitions = [labels[0]] + [b for a, b in zip(labels, labels[1:]) if a != b]
	assert transitions == ['Ingratitude-leaning', 'Developing', 'Gratitude-oriented']


def test_band_labels_and_tones() -> None:
	assert classify(21).snapshot()["tone"] == 'success'
	assert classify(15).snapshot()["tone"] == 'warn'
	assert classify(5).snapshot() == {
		"label": 'Ingratitude-leaning',
		"tone": 'danger',
		"message": INGRATITUDE_LEANING.message,
	}


def test_total_score_treats_unanswered_as_zero() -> None:
	assert total_score([None, None, None, None, None]) == 0
	assert total_score([5, None, 3, None, 1]) == 9
	assert total_score([5, 4, 3, 4, 5]) == 21
