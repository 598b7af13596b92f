"""
Model: RepositoryObject
Node of the host repository tree (categories, courses, groups, folders, objects).
"""

from nolej_pc.db import db


class RepositoryObject(db.Model):
    __tablename__ = "repository_tree"

    ref_id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    parent_id = db.Column(db.Integer, db.ForeignKey("repository_tree.ref_id"), nullable=True, index=True)
    type = db.Column(db.String(10), nullable=False)
    title = db.Column(db.String(250), nullable=False, default="")
    position = db.Column(db.Integer, default=0)
