from typing import Dict, Sequence, Tuple

from .models import CategoryFlags


# Matching is plain substring containment: "chest" also fires inside "chestnut".
CATEGORY_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "respiratory": ("cough", "throat", "breathing", "chest", "congestion", "runny nose", "sneezing"),
    "fever": ("fever", "temperature", "hot", "chills", "sweating"),
    "pain": ("pain", "ache", "hurt", "sore", "tender"),
    "digestive": ("nausea", "vomit", "stomach", "abdominal", "diarrhea", "appetite"),
    "neurological": ("headache", "dizzy", "confusion", "memory", "concentration"),
    "fatigue": ("tired", "fatigue", "exhausted", "weak", "energy"),
    "skin": ("rash", "itchy", "swelling", "red", "bump"),
    "emergency": (
        "severe",
        "intense",
        "unbearable",
        "emergency",
        "urgent",
        "difficulty breathing",
        "chest pain",
    ),
}


def normalize_symptoms(symptoms: Sequence[str]) -> str:
    return " ".join(symptoms).lower()


def extract_keywords(symptom_text: str) -> CategoryFlags:
    """Flag every category whose trigger words occur in the normalized text."""
    found = {
        category: any(word in symptom_text for word in words)
        for category, words in CATEGORY_KEYWORDS.items()
    }
    return CategoryFlags(**found)
