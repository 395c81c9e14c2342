import psycopg

from docverify.database.models import PENDING_REVIEW, ModerationRecord
from docverify.database.repositories.moderation_repository import ModerationRepository
from docverify.imaging.models import ImageAsset
from docverify.logging.logger import Log


class ModerationEnqueuer:
    """Records that a verified-enough document triple awaits human review."""

    def __init__(self, repository: ModerationRepository) -> None:
        self._repository = repository

    def enqueue(
        self,
        user_id: int,
        front: ImageAsset,
        back: ImageAsset,
        selfie: ImageAsset,
        submission_id: str | None = None,
    ) -> bool:
        """Create one pending_review record. Returns False if storage fails."""
        record = ModerationRecord(
            user_id=user_id,
            front_image=front.reference,
            back_image=back.reference,
            selfie_image=selfie.reference,
            status=PENDING_REVIEW,
            submission_id=submission_id,
        )
        try:
            record_id = self._repository.insert(record)
        except (psycopg.Error, RuntimeError, OSError) as exc:
            Log.error(
                f"Failed to add documents to moderation queue: {exc}",
                user_id=user_id,
                submission_id=submission_id,
            )
            return False

        if record_id is None:
            Log.info(
                "Submission already queued for review",
                user_id=user_id,
                submission_id=submission_id,
            )
        else:
            Log.info(
                "Documents added to moderation queue",
                user_id=user_id,
                record_id=record_id,
            )
        return True
