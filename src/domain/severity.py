from typing import Tuple


MAX_SEVERITY_SCORE = 10

# (points, tokens) pairs; every band that matches contributes, bands are not exclusive.
SEVERITY_BANDS: Tuple[Tuple[int, Tuple[str, ...]], ...] = (
    (3, ("severe", "10")),
    (2, ("moderate", "8", "9")),
    (1, ("mild", "1", "2")),
)

DURATION_BANDS: Tuple[Tuple[int, Tuple[str, ...]], ...] = (
    (2, ("weeks", "chronic")),
    (1, ("days",)),
)


def calculate_severity_score(symptom_text: str) -> int:
    """
    Score intensity and duration cues found in normalized symptom text.

    Args:
        symptom_text: Lower-cased, joined symptom text

    Returns:
        Integer score between 0 and 10
    """
    score = 0
    for points, tokens in SEVERITY_BANDS + DURATION_BANDS:
        if any(token in symptom_text for token in tokens):
            score += points
    return min(score, MAX_SEVERITY_SCORE)
