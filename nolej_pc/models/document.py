"""
Model: NolejDocument
"""

from nolej_pc.db import db
from nolej_pc.constants import TABLE_DOC


class NolejDocument(db.Model):
    __tablename__ = TABLE_DOC

    document_id = db.Column(db.String(50), primary_key=True)
    title = db.Column(db.String(250), nullable=False, default="")
    status = db.Column(db.Integer, nullable=False, default=0)