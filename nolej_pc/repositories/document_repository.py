"""
Repository for NolejDocument database operations
"""

from nolej_pc.constants import STATUS_COMPLETED
from nolej_pc.models.document import NolejDocument


class DocumentRepository:
    """Repository for NolejDocument database operations"""

    @staticmethod
    def get_completed():
        """Documents whose activities have been generated"""
        return NolejDocument.query.filter_by(status=STATUS_COMPLETED).all()
