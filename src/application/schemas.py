from typing import List, Union
from pydantic import BaseModel, field_validator

from src.domain.models import SymptomEntry


class DiagnosisRequest(BaseModel):
    symptoms: List[Union[str, SymptomEntry]] = []

    @field_validator("symptoms", mode="before")
    @classmethod
    def default_empty(cls, v):
        # A missing or null symptoms list is reported as "no symptoms", not a fault
        return v if v is not None else []


class ResetRequestResult(BaseModel):
    success: bool
    message: str
