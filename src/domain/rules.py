import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .models import CategoryFlags, DiagnosisResult, Severity


logger = logging.getLogger(__name__)


Predicate = Callable[[CategoryFlags, int], bool]
TierRule = Callable[[int], Severity]


def _always(tier: Severity) -> TierRule:
    return lambda score: tier


def _moderate_above(threshold: int) -> TierRule:
    return lambda score: "moderate" if score > threshold else "mild"


@dataclass(frozen=True)
class ConditionRule:
    priority: int
    name: str
    confidence: int
    explanation: str
    recommendations: Tuple[str, ...]
    matches: Predicate
    tier: TierRule
    seek_immediate_care: bool = False

    def build_result(self, severity_score: int) -> DiagnosisResult:
        return DiagnosisResult(
            condition=self.name,
            confidence=self.confidence,
            severity=self.tier(severity_score),
            explanation=self.explanation,
            recommendations=self.recommendations,
            seek_immediate_care=self.seek_immediate_care,
        )


EMERGENCY_RULE = ConditionRule(
    priority=1,
    name="Emergency Medical Condition",
    confidence=95,
    explanation="Your symptoms suggest a serious condition that requires immediate medical attention.",
    recommendations=(
        "Seek immediate emergency medical care",
        "Call 911 or go to the nearest emergency room",
        "Do not delay medical treatment",
        "Have someone accompany you if possible",
    ),
    matches=lambda k, score: k.emergency or (k.respiratory and k.pain and score > 7),
    tier=_always("severe"),
    seek_immediate_care=True,
)

RESPIRATORY_INFECTION_RULE = ConditionRule(
    priority=2,
    name="Upper Respiratory Infection",
    confidence=85,
    explanation="Your symptoms are consistent with a viral or bacterial upper respiratory infection.",
    recommendations=(
        "Get plenty of rest and stay hydrated",
        "Use a humidifier or breathe steam",
        "Consider over-the-counter pain relievers",
        "Consult a doctor if symptoms worsen or persist beyond 7-10 days",
        "Avoid close contact with others to prevent spread",
    ),
    matches=lambda k, score: k.respiratory and k.fever,
    tier=_moderate_above(6),
)

FLU_LIKE_RULE = ConditionRule(
    priority=3,
    name="Viral Flu-like Illness",
    confidence=82,
    explanation="Your symptoms suggest a viral illness, possibly influenza or similar infection.",
    recommendations=(
        "Rest and avoid strenuous activities",
        "Drink plenty of fluids",
        "Take fever reducers as needed",
        "Isolate yourself to prevent spreading illness",
        "See a healthcare provider if symptoms are severe or prolonged",
    ),
    matches=lambda k, score: k.fever and k.fatigue and (k.pain or k.neurological),
    tier=_moderate_above(6),
)

TENSION_HEADACHE_RULE = ConditionRule(
    priority=4,
    name="Tension Headache",
    confidence=78,
    explanation=(
        "Your symptoms are consistent with tension-type headaches, often caused by stress or muscle tension."
    ),
    recommendations=(
        "Apply cold or warm compress to head/neck",
        "Practice relaxation techniques",
        "Ensure adequate sleep and regular meals",
        "Consider over-the-counter pain relievers",
        "Identify and avoid potential triggers",
    ),
    matches=lambda k, score: k.neurological and not k.fever,
    tier=_moderate_above(7),
)

GASTROINTESTINAL_RULE = ConditionRule(
    priority=5,
    name="Gastrointestinal Upset",
    confidence=75,
    explanation="Your symptoms suggest digestive system irritation, possibly from food, stress, or minor infection.",
    recommendations=(
        "Stay hydrated with clear fluids",
        "Follow the BRAT diet (bananas, rice, applesauce, toast)",
        "Avoid dairy, fatty, or spicy foods temporarily",
        "Rest and avoid strenuous activity",
        "Seek medical care if symptoms persist or worsen",
    ),
    matches=lambda k, score: k.digestive,
    tier=_moderate_above(6),
)

FATIGUE_RULE = ConditionRule(
    priority=6,
    name="General Fatigue Syndrome",
    confidence=70,
    explanation=(
        "Your symptoms suggest general fatigue, which can have many causes including stress, "
        "poor sleep, or early illness."
    ),
    recommendations=(
        "Ensure adequate sleep (7-9 hours nightly)",
        "Maintain regular exercise routine",
        "Eat a balanced, nutritious diet",
        "Manage stress through relaxation techniques",
        "Consider vitamin D and B12 levels if fatigue persists",
    ),
    matches=lambda k, score: k.fatigue,
    tier=_always("mild"),
)

GENERAL_ASSESSMENT_RULE = ConditionRule(
    priority=7,
    name="General Health Assessment",
    confidence=65,
    explanation="Based on your symptoms, this appears to be a general health concern that should be monitored.",
    recommendations=(
        "Monitor symptoms closely and track any changes",
        "Maintain good hydration and nutrition",
        "Get adequate rest and sleep",
        "Consult a healthcare provider if symptoms persist or worsen",
        "Keep a symptom diary to identify patterns",
    ),
    matches=lambda k, score: True,
    tier=_moderate_above(6),
)

# Evaluated in order; the first matching rule wins.
CONDITION_RULES: List[ConditionRule] = [
    EMERGENCY_RULE,
    RESPIRATORY_INFECTION_RULE,
    FLU_LIKE_RULE,
    TENSION_HEADACHE_RULE,
    GASTROINTESTINAL_RULE,
    FATIGUE_RULE,
    GENERAL_ASSESSMENT_RULE,
]


def match_rule(keywords: Optional[CategoryFlags], severity_score: int) -> ConditionRule:
    flags = keywords or CategoryFlags()
    matched = next(
        (rule for rule in CONDITION_RULES if rule.matches(flags, severity_score)),
        GENERAL_ASSESSMENT_RULE,
    )
    logger.debug("Matched rule %d (%s) at severity score %d", matched.priority, matched.name, severity_score)
    return matched


def determine_condition(keywords: Optional[CategoryFlags], severity_score: int) -> DiagnosisResult:
    return match_rule(keywords, severity_score).build_result(severity_score)
