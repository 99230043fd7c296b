"""Background authenticity verification."""

from interview_room.services.verification.dispatcher import VerificationDispatcher
from interview_room.services.verification.mailbox import VerificationMailbox
from interview_room.services.verification.models import (
    MalformedVerificationError,
    VerificationAnswer,
    VerificationFailure,
    VerificationRequest,
    VerificationResult,
    VerificationSuccess,
)
from interview_room.services.verification.verifier import AuthenticityVerifier, parse_verification_answer

__all__ = [
    "AuthenticityVerifier",
    "MalformedVerificationError",
    "VerificationAnswer",
    "VerificationDispatcher",
    "VerificationFailure",
    "VerificationMailbox",
    "VerificationRequest",
    "VerificationResult",
    "VerificationSuccess",
    "parse_verification_answer",
]
