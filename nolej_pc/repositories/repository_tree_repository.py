"""
Repository for the host repository tree
"""

from nolej_pc.models.repository_object import RepositoryObject


class RepositoryTreeRepository:
    """Repository for RepositoryObject database operations"""

    @staticmethod
    def get_root():
        return RepositoryObject.query.filter(RepositoryObject.parent_id.is_(None)).first()

    @staticmethod
    def get_children(ref_id, types=None):
        """Children of a node, optionally restricted to a list of types"""
        query = RepositoryObject.query.filter_by(parent_id=ref_id)
        if types:
            query = query.filter(RepositoryObject.type.in_(types))
        return query.order_by(RepositoryObject.position, RepositoryObject.title).all()
