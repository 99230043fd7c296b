"""Verification service models."""

from dataclasses import dataclass

from pydantic import BaseModel, Field


class MalformedVerificationError(ValueError):
    """The verifier's output was not a valid VerificationAnswer record."""


class VerificationAnswer(BaseModel):
    """Structured record the verifier agent must output."""

    confidence: float = Field(..., ge=-1.0, le=1.0, description="0..1, or -1 when no answer was found")
    reason: str = Field(..., description="Short explanation of the answer")
    answer: str = Field(..., description="The answer to the question")


@dataclass(frozen=True)
class VerificationRequest:
    """A question handed to the background verifier."""

    id: str
    question: str


def _format_confidence(value: float) -> str:
    # 1.0 -> "1", 0.9 -> "0.9"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True)
class VerificationSuccess:
    """Completed verification."""

    id: str
    confidence: float
    reason: str
    answer: str

    def describe(self) -> str:
        return (
            f"Authenticity verification result: ID: {self.id}\n"
            f"Confidence: {_format_confidence(self.confidence)}\n"
            f"Reason: {self.reason}\n"
            f"Answer: {self.answer}"
        )


@dataclass(frozen=True)
class VerificationFailure:
    """Verification that raised, timed out, or returned malformed output."""

    id: str
    error: str

    def describe(self) -> str:
        return (
            f"Authenticity verification error: ID: {self.id}\n"
            f"Error: {self.error}"
        )


VerificationResult = VerificationSuccess | VerificationFailure
