from dataclasses import dataclass
from typing import Optional, Sequence

from .keywords import extract_keywords, normalize_symptoms
from .models import CategoryFlags, DiagnosisResult
from .rules import match_rule
from .severity import calculate_severity_score


NO_SYMPTOMS_RESULT = DiagnosisResult(
    condition="No symptoms provided",
    confidence=0,
    severity="mild",
    explanation="Please provide symptoms for analysis",
    recommendations=("Please provide symptoms for analysis",),
    seek_immediate_care=False,
)


@dataclass(frozen=True)
class DiagnosisTrace:
    """Intermediate stage outputs behind a single diagnosis."""

    symptom_text: str
    keywords: CategoryFlags
    severity_score: int
    rule_priority: Optional[int]
    result: DiagnosisResult


def analyze(symptoms: Sequence[str]) -> DiagnosisTrace:
    if not symptoms:
        return DiagnosisTrace(
            symptom_text="",
            keywords=CategoryFlags(),
            severity_score=0,
            rule_priority=None,
            result=NO_SYMPTOMS_RESULT,
        )

    symptom_text = normalize_symptoms(symptoms)
    keywords = extract_keywords(symptom_text)
    severity_score = calculate_severity_score(symptom_text)
    rule = match_rule(keywords, severity_score)

    return DiagnosisTrace(
        symptom_text=symptom_text,
        keywords=keywords,
        severity_score=severity_score,
        rule_priority=rule.priority,
        result=rule.build_result(severity_score),
    )


def diagnose(symptoms: Sequence[str]) -> DiagnosisResult:
    """
    Map a symptom report to a rule-based diagnosis.

    Args:
        symptoms: Free-text symptom descriptions, in the order entered

    Returns:
        DiagnosisResult; the "No symptoms provided" sentinel for an empty list
    """
    return analyze(symptoms).result
