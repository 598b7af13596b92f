"""
Models: Page, PageComponent
Host page store. Plugged components keep their plugin properties as JSON.
"""

from nolej_pc.db import db
from nolej_pc.utils import now_utc


class Page(db.Model):
    __tablename__ = "page_object"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(250), nullable=False, default="")
    parent_type = db.Column(db.String(10), nullable=False, default="cont")
    last_change = db.Column(db.DateTime, default=now_utc, onupdate=now_utc)

    components = db.relationship(
        "PageComponent",
        backref="page",
        lazy=True,
        order_by="PageComponent.position",
        cascade="all, delete-orphan",
    )


class PageComponent(db.Model):
    __tablename__ = "page_pc_plugged"

    id = db.Column(db.Integer, primary_key=True)
    page_id = db.Column(db.Integer, db.ForeignKey("page_object.id", ondelete="CASCADE"), nullable=False, index=True)
    plugin_name = db.Column(db.String(100), nullable=False)
    plugin_version = db.Column(db.String(20), nullable=False)
    properties = db.Column(db.JSON, nullable=False, default=dict)
    position = db.Column(db.Integer, nullable=False, default=0)
