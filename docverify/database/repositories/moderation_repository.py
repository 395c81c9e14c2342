from psycopg.rows import dict_row

from docverify.database.connection import get_connection
from docverify.database.models import ModerationRecord


class ModerationRepository:
    """Database operations for the moderation_queue table.

    Expected columns: id, user_id, front_image, back_image, selfie_image,
    status, submission_id (unique, nullable), created_at.
    """

    def insert(self, record: ModerationRecord) -> int | None:
        """Append a record to the queue.

        Returns the new row id, or None when a record with the same
        submission_id already exists. Records without a submission_id are
        always inserted.
        """
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO moderation_queue
                    (user_id, front_image, back_image, selfie_image, status,
                     submission_id, created_at)
                    VALUES (%s, %s, %s, %s, %s, %s, NOW())
                    ON CONFLICT (submission_id) DO NOTHING
                    RETURNING id
                    """,
                    (
                        record.user_id,
                        record.front_image,
                        record.back_image,
                        record.selfie_image,
                        record.status,
                        record.submission_id,
                    ),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            return None
        return int(row[0])

    def find_by_user(self, user_id: int) -> list[ModerationRecord]:
        """List a user's queue records, oldest first. Used by reviewers and tests."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, user_id, front_image, back_image, selfie_image,
                           status, submission_id, created_at
                    FROM moderation_queue
                    WHERE user_id = %s
                    ORDER BY created_at, id
                    """,
                    (user_id,),
                )
                rows = cur.fetchall()

        return [
            ModerationRecord(
                id=row["id"],
                user_id=row["user_id"],
                front_image=row["front_image"],
                back_image=row["back_image"],
                selfie_image=row["selfie_image"],
                status=row["status"],
                submission_id=row["submission_id"],
                created_at=row["created_at"],
            )
            for row in rows
        ]
