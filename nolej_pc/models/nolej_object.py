"""
Model: NolejObject
Nolej repository object data, links a reference id to its document.
"""

from nolej_pc.db import db
from nolej_pc.constants import TABLE_DATA


class NolejObject(db.Model):
    __tablename__ = TABLE_DATA

    ref_id = db.Column(db.Integer, db.ForeignKey("repository_tree.ref_id"), primary_key=True, autoincrement=False)
    document_id = db.Column(db.String(50), nullable=True)

    repository_object = db.relationship("RepositoryObject")
