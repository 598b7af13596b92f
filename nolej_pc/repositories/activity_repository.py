"""
Repository for NolejActivity database operations
"""

from nolej_pc.db import db
from nolej_pc.models.activity import NolejActivity
from nolej_pc.models.document import NolejDocument


class ActivityRepository:
    """Repository for NolejActivity database operations"""

    @staticmethod
    def get_generation_timestamps(document_id):
        """Distinct generation timestamps of a document, most recent first"""
        rows = (
            db.session.query(NolejActivity.generated)
            .filter(NolejActivity.document_id == document_id)
            .distinct()
            .order_by(NolejActivity.generated.desc())
            .all()
        )
        return [row[0] for row in rows]

    @staticmethod
    def has_activities(document_id):
        return len(ActivityRepository.get_generation_timestamps(document_id)) > 0

    @staticmethod
    def get_by_document(document_id):
        """Activities of a document as (type, content_id, generated), most recent batch first"""
        return (
            db.session.query(NolejActivity.type, NolejActivity.content_id, NolejActivity.generated)
            .filter(NolejActivity.document_id == document_id)
            .order_by(NolejActivity.generated.desc())
            .all()
        )

    @staticmethod
    def find_selection(content_id, document_id=None, status=None):
        """Resolve a stored selection.

        Returns the (title, type) row of the document/activity join, or None
        when the content does not exist, belongs to another document or the
        document is not in the given status.
        """
        query = (
            db.session.query(NolejDocument.title, NolejActivity.type)
            .join(NolejActivity, NolejActivity.document_id == NolejDocument.document_id)
            .filter(NolejActivity.content_id == content_id)
        )
        if document_id is not None:
            query = query.filter(NolejActivity.document_id == document_id)
        if status is not None:
            query = query.filter(NolejDocument.status == status)
        return query.first()
