from dataclasses import dataclass
from datetime import datetime

PENDING_REVIEW = "pending_review"


@dataclass
class ModerationRecord:
    """Represents a row from the moderation_queue table."""

    user_id: int
    front_image: str
    back_image: str
    selfie_image: str
    status: str = PENDING_REVIEW
    submission_id: str | None = None
    id: int | None = None
    created_at: datetime | None = None
