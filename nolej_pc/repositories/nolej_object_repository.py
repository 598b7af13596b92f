"""
Repository for NolejObject database operations
"""

from nolej_pc.db import db
from nolej_pc.models.nolej_object import NolejObject


class NolejObjectRepository:
    """Repository for NolejObject database operations"""

    @staticmethod
    def get_by_ref_id(ref_id):
        return db.session.get(NolejObject, ref_id)

    @staticmethod
    def get_document_id(ref_id):
        obj = db.session.get(NolejObject, ref_id)
        return obj.document_id if obj else None
