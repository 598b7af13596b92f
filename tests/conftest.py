"""
Pytest fixtures and configuration for the Nolej page component tests
"""
import pytest
from unittest.mock import MagicMock

from nolej_pc.app import create_app
from nolej_pc.constants import STATUS_COMPLETED, STATUS_ANALYSIS, PLUGIN_ID
from nolej_pc.db import db
from nolej_pc.models import (
    NolejActivity,
    NolejDocument,
    NolejObject,
    Page,
    RepositoryObject,
)

BATCH_RECENT = 1700000000
BATCH_OLD = 1690000000


@pytest.fixture
def app_settings():
    """Settings for an isolated in-memory application"""
    return {
        'database': {'uri': 'sqlite:///:memory:'},
        'plugin': {'active': True},
        'h5p': {'base_url': 'http://h5p.test', 'mode': 'iframe', 'timeout': 5},
        'secret_key': 'test-secret-key',
    }


@pytest.fixture
def app(app_settings):
    _app = create_app(app_settings)
    _app.config.update(TESTING=True, SERVER_NAME='localhost')

    with _app.app_context():
        seed_database()
        yield _app
        db.session.remove()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def mock_renderer():
    renderer = MagicMock()
    renderer.get_html.return_value = '<div class="h5p-activity">player</div>'
    return renderer


def seed_database():
    """Repository tree, Nolej documents and activities, one empty page"""
    db.session.add_all([
        RepositoryObject(ref_id=1, parent_id=None, type='root', title='Repository'),
        RepositoryObject(ref_id=2, parent_id=1, type='cat', title='Biology'),
        RepositoryObject(ref_id=3, parent_id=2, type='crs', title='Plants 101', position=1),
        RepositoryObject(ref_id=10, parent_id=3, type=PLUGIN_ID, title='Photosynthesis module', position=1),
        RepositoryObject(ref_id=11, parent_id=3, type=PLUGIN_ID, title='Empty module', position=2),
        RepositoryObject(ref_id=12, parent_id=3, type='file', title='Slides.pdf', position=3),
        NolejObject(ref_id=10, document_id='D1'),
        NolejObject(ref_id=11, document_id='D2'),
        NolejDocument(document_id='D1', title='Photosynthesis', status=STATUS_COMPLETED),
        NolejDocument(document_id='D2', title='Empty document', status=STATUS_COMPLETED),
        NolejDocument(document_id='D3', title='Draft document', status=STATUS_ANALYSIS),
        NolejActivity(content_id=42, document_id='D1', type='glossary', generated=BATCH_RECENT),
        NolejActivity(content_id=43, document_id='D1', type='summary', generated=BATCH_RECENT),
        NolejActivity(content_id=44, document_id='D1', type='crossword', generated=BATCH_OLD),
        NolejActivity(content_id=50, document_id='D3', type='flashcards', generated=BATCH_OLD),
        Page(id=1, title='Lesson one', parent_type='crs'),
    ])
    db.session.commit()
