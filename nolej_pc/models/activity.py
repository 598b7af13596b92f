"""
Model: NolejActivity
One H5P content generated for a document. Activities generated together share
the same `generated` timestamp.
"""

from nolej_pc.db import db
from nolej_pc.constants import TABLE_H5P, TABLE_DOC


class NolejActivity(db.Model):
    __tablename__ = TABLE_H5P

    content_id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    document_id = db.Column(db.String(50), db.ForeignKey(f"{TABLE_DOC}.document_id"), nullable=False, index=True)
    type = db.Column(db.String(250), nullable=False)
    generated = db.Column(db.Integer, nullable=False)  # Unix timestamp

    document = db.relationship("NolejDocument", backref=db.backref("activities", lazy=True))
