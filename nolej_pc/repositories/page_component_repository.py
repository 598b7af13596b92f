"""
Repository for plugged page components
"""

import structlog
from sqlalchemy.exc import SQLAlchemyError

from nolej_pc.db import db
from nolej_pc.models.page import Page, PageComponent

logger = structlog.get_logger('page_component_repository')


class PageComponentRepository:
    """Repository for PageComponent database operations"""

    @staticmethod
    def get_page(page_id):
        return db.session.get(Page, page_id)

    @staticmethod
    def get_by_id(pc_id):
        return db.session.get(PageComponent, pc_id)

    @staticmethod
    def get_by_page(page_id):
        return (
            PageComponent.query.filter_by(page_id=page_id)
            .order_by(PageComponent.position)
            .all()
        )

    @staticmethod
    def create(page_id, plugin_name, plugin_version, properties):
        """Append a plugged component to a page"""
        try:
            position = PageComponent.query.filter_by(page_id=page_id).count()
            item = PageComponent(
                page_id=page_id,
                plugin_name=plugin_name,
                plugin_version=plugin_version,
                properties=dict(properties),
                position=position,
            )
            db.session.add(item)
            db.session.commit()
            db.session.refresh(item)
            return item
        except SQLAlchemyError as e:
            db.session.rollback()
            raise e

    @staticmethod
    def update(pc_id, plugin_version, properties):
        """Replace the properties of a plugged component"""
        item = db.session.get(PageComponent, pc_id)
        if not item:
            return None

        try:
            item.properties = dict(properties)
            item.plugin_version = plugin_version
            db.session.commit()
            return item
        except SQLAlchemyError as e:
            db.session.rollback()
            raise e

    @staticmethod
    def delete(pc_id):
        item = db.session.get(PageComponent, pc_id)
        if not item:
            return False

        try:
            db.session.delete(item)
            db.session.commit()
            return True
        except SQLAlchemyError as e:
            db.session.rollback()
            raise e

    @staticmethod
    def clone_page(page_id, on_clone):
        """Copy a page with its components.

        `on_clone(component)` returns the properties to store in the copy.
        """
        page = db.session.get(Page, page_id)
        if not page:
            return None

        try:
            copy = Page(title=page.title, parent_type=page.parent_type)
            db.session.add(copy)
            db.session.flush()
            for component in page.components:
                db.session.add(PageComponent(
                    page_id=copy.id,
                    plugin_name=component.plugin_name,
                    plugin_version=component.plugin_version,
                    properties=dict(on_clone(component)),
                    position=component.position,
                ))
            db.session.commit()
            logger.info(f"Page {page_id} cloned to {copy.id}")
            return copy
        except SQLAlchemyError as e:
            db.session.rollback()
            raise e
