from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class VerificationStatus(StrEnum):
    NOT_SUBMITTED = "not_submitted"
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


@dataclass(frozen=True)
class DocumentState:
    """A user's document-verification fields as stored by the account system."""

    document_verified: bool = False
    front_image: str | None = None
    back_image: str | None = None
    selfie_image: str | None = None
    rejection_reason: str | None = None
    reviewed_at: datetime | None = None

    @property
    def has_all_documents(self) -> bool:
        return bool(self.front_image and self.back_image and self.selfie_image)


def resolve_verification_status(state: DocumentState) -> VerificationStatus:
    """Derive the status shown to a user from their stored document state.

    A moderator's decision wins over the submission state: verified, then
    rejected, then pending once all three images are uploaded.
    """
    if state.document_verified:
        return VerificationStatus.VERIFIED
    if state.rejection_reason:
        return VerificationStatus.REJECTED
    if state.has_all_documents:
        return VerificationStatus.PENDING
    return VerificationStatus.NOT_SUBMITTED
