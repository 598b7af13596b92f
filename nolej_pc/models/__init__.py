"""
Models package

Nolej tables (read-only from the page component):
- document.py: generated documents
- activity.py: H5P activities generated for a document
- nolej_object.py: repository objects of the Nolej type

Host tables:
- repository_object.py: repository tree browsed by the selector
- page.py: pages and their plugged components
"""

from .document import NolejDocument
from .activity import NolejActivity
from .nolej_object import NolejObject
from .repository_object import RepositoryObject
from .page import Page, PageComponent

__all__ = [
    "NolejDocument",
    "NolejActivity",
    "NolejObject",
    "RepositoryObject",
    "Page",
    "PageComponent",
]
