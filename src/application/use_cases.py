import json
import logging
import time
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

from src.application.schemas import DiagnosisRequest
from src.domain.engine import diagnose
from src.domain.models import DiagnosisResult, SymptomEntry
from src.infrastructure.config import Settings


logger = logging.getLogger(__name__)


ANALYSIS_ERROR_RESULT = DiagnosisResult(
    condition="Analysis Error",
    confidence=0,
    severity="mild",
    explanation="Unable to process symptoms at this time due to a technical issue",
    recommendations=(
        "Please try again in a few moments",
        "Consult healthcare provider if symptoms persist",
        "Monitor symptoms closely",
        "Seek immediate care if symptoms worsen",
    ),
    seek_immediate_care=False,
)


def symptom_to_text(symptom: Union[str, SymptomEntry]) -> str:
    """Flatten a structured or JSON-encoded symptom entry into plain text."""
    if isinstance(symptom, SymptomEntry):
        return symptom.to_text()

    stripped = symptom.strip()
    if stripped.startswith("{"):
        try:
            return SymptomEntry(**json.loads(stripped)).to_text()
        except (json.JSONDecodeError, TypeError, ValueError):
            # Not a structured entry after all; keep the text as typed
            return symptom
    return symptom


def flatten_symptoms(symptoms: Sequence[Union[str, SymptomEntry]]) -> List[str]:
    return [symptom_to_text(s) for s in symptoms]


class DiagnosisRequestHandler:
    """Request boundary around the rule engine: JSON in, (status, payload) out."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.settings = settings or Settings()
        self.sleep = sleep

    def handle(self, body: Union[str, bytes, dict, Any]) -> Tuple[int, dict]:
        try:
            if isinstance(body, (str, bytes)):
                body = json.loads(body)
            request = DiagnosisRequest.model_validate(body)
            result = diagnose(flatten_symptoms(request.symptoms))

            delay = self.settings.diagnosis_delay_seconds
            if delay and request.symptoms:
                self.sleep(delay)

            return 200, result.to_payload()
        except Exception as e:
            logger.exception("Diagnosis request failed: %s", e)
            return 500, ANALYSIS_ERROR_RESULT.to_payload()
