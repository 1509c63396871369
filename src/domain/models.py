from datetime import datetime
from typing import Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator


Severity = Literal["mild", "moderate", "severe"]


class CategoryFlags(BaseModel):
    model_config = ConfigDict(frozen=True)

    respiratory: bool = False
    fever: bool = False
    pain: bool = False
    digestive: bool = False
    neurological: bool = False
    fatigue: bool = False
    skin: bool = False
    emergency: bool = False


class SymptomEntry(BaseModel):
    name: str
    severity: Optional[int] = Field(None, ge=0, le=10)
    duration: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str):
        v = v.strip()
        if len(v) == 0:
            raise ValueError("symptom name must not be blank")
        return v

    def to_text(self) -> str:
        # Every token here is seen by the severity scorer; emit reported facts only
        parts = [self.name]
        if self.severity is not None:
            parts.append(f"severity {self.severity}")
        if self.duration:
            parts.append(f"for {self.duration}")
        if self.location:
            parts.append(f"in {self.location}")
        if self.description:
            parts.append(self.description)
        return ", ".join(parts)


class DiagnosisResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    condition: str
    confidence: int = Field(..., ge=0, le=100)
    severity: Severity
    explanation: str
    recommendations: Tuple[str, ...]
    seek_immediate_care: bool = Field(False, alias="seekImmediateCare")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class ResetToken(BaseModel):
    email: str
    token: str
    expires_at: datetime
    used: bool = False

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
