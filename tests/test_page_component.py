"""
Tests for the page component controller
"""
import re

import pytest
from unittest.mock import MagicMock

from nolej_pc.app import create_app
from nolej_pc.constants import PLUGIN_NAME
from nolej_pc.db import db
from nolej_pc.exceptions import PluginNotActiveException
from nolej_pc.models import NolejDocument, Page, PageComponent
from nolej_pc.page_component_gui import NolejPageComponentGUI
from nolej_pc.repositories.page_component_repository import PageComponentRepository


@pytest.fixture
def gui(app, mock_renderer):
    plugin = app.plugin_manager.get(PLUGIN_NAME)
    return NolejPageComponentGUI(plugin, MagicMock(), MagicMock(), app.i18n, mock_renderer)


def add_component(properties, page_id=1):
    return PageComponentRepository.create(page_id, PLUGIN_NAME, '1.1.0', properties)


class TestElementHtml:
    """Tests for rendering the stored selection"""

    def test_edit_mode_summary(self, gui):
        html = gui.get_element_html('edit', {'document_id': 'D1', 'content_id': 42}, '1.1.0')

        assert html == '<p>Activity selected: Glossary of Photosynthesis</p>'

    def test_presentation_delegates_content_id(self, gui, mock_renderer):
        html = gui.get_element_html('presentation', {'document_id': 'D1', 'content_id': '42'}, '1.1.0')

        mock_renderer.get_html.assert_called_once_with(42)
        assert 'player' in html

    @pytest.mark.parametrize('mode', ['edit', 'presentation', 'print', 'preview', 'offline'])
    def test_missing_content_id(self, gui, mock_renderer, mode):
        html = gui.get_element_html(mode, {'document_id': 'D1'}, '1.1.0')

        assert html == '<p>Activity not found!</p>'
        mock_renderer.get_html.assert_not_called()

    def test_dangling_content_id(self, gui):
        html = gui.get_element_html('edit', {'document_id': 'D1', 'content_id': 999}, '1.1.0')

        assert html == '<p>Activity does not exist!</p>'

    def test_content_of_another_document(self, gui):
        html = gui.get_element_html('edit', {'document_id': 'D2', 'content_id': 42}, '1.1.0')

        assert html == '<p>Activity does not exist!</p>'

    def test_title_is_escaped(self, app, gui):
        db.session.get(NolejDocument, 'D1').title = '<b>Bold</b>'
        db.session.commit()

        html = gui.get_element_html('edit', {'content_id': 42}, '1.1.0')

        assert '&lt;b&gt;Bold&lt;/b&gt;' in html

    def test_localized_summary(self, app, gui):
        with app.test_request_context('/', headers={'Accept-Language': 'it'}):
            html = gui.get_element_html('edit', {'document_id': 'D1', 'content_id': 42}, '1.1.0')

        assert html == '<p>Attività selezionata: Glossario di Photosynthesis</p>'


class TestCommands:
    """Tests for the page editor commands"""

    def test_insert_shows_form(self, client):
        response = client.get('/page/1/component?cmd=insert')
        html = response.get_data(as_text=True)

        assert response.status_code == 200
        assert 'pcnlj_setup_modal("il_ui_modal_' in html
        assert "pcnlj_show_modal(&#39;10&#39;)" in html
        assert 'Empty module' in html
        assert 'Slides.pdf' not in html
        # Completed documents only
        assert 'value="D1"' in html
        assert 'value="D2"' in html
        assert 'value="D3"' not in html

    def test_create_persists_selection(self, client):
        response = client.get('/page/1/component?cmd=create&document_id=D1&content_id=42')

        assert response.status_code == 302
        assert response.headers['Location'].endswith('/page/1/edit')
        components = PageComponentRepository.get_by_page(1)
        assert len(components) == 1
        assert components[0].properties == {'document_id': 'D1', 'content_id': 42}
        assert components[0].plugin_name == PLUGIN_NAME

    def test_create_then_render_round_trip(self, client):
        client.post('/page/1/component', data={'cmd': 'create', 'document_id': 'D1', 'content_id': '42'})

        editor = client.get('/page/1/edit').get_data(as_text=True)
        assert 'Object created.' in editor
        assert 'Activity selected: Glossary of Photosynthesis' in editor

        page = client.get('/page/1').get_data(as_text=True)
        assert 'http://h5p.test/play/42' in page

    def test_create_rejects_unknown_pair(self, client):
        response = client.get(
            '/page/1/component?cmd=create&document_id=D2&content_id=42',
            follow_redirects=True,
        )

        assert response.status_code == 200
        assert 'could not be saved' in response.get_data(as_text=True)
        assert PageComponent.query.count() == 0

    def test_create_rejects_document_in_analysis(self, client):
        response = client.get(
            '/page/1/component?cmd=create&document_id=D3&content_id=50',
            follow_redirects=True,
        )

        assert response.status_code == 200
        assert 'could not be saved' in response.get_data(as_text=True)
        assert PageComponent.query.count() == 0

    def test_create_rejects_missing_content(self, client):
        client.get('/page/1/component?cmd=create&document_id=D1')

        assert PageComponent.query.count() == 0

    def test_edit_checks_stored_activity(self, client):
        component = add_component({'document_id': 'D1', 'content_id': 44})
        response = client.get(f'/page/1/component/{component.id}?cmd=edit')
        html = response.get_data(as_text=True)

        assert response.status_code == 200
        assert re.search(r'value="44"\s+checked', html)
        assert re.search(r'value="D1"\s+checked', html)
        assert 'value="update"' in html

    def test_update_overwrites_selection(self, client):
        component = add_component({'document_id': 'D1', 'content_id': 42})
        response = client.get(f'/page/1/component/{component.id}?cmd=update&document_id=D1&content_id=44')

        assert response.status_code == 302
        assert PageComponentRepository.get_by_id(component.id).properties['content_id'] == 44

    def test_update_rejects_document_in_analysis(self, client):
        component = add_component({'document_id': 'D1', 'content_id': 42})
        response = client.get(
            f'/page/1/component/{component.id}?cmd=update&document_id=D3&content_id=50',
            follow_redirects=True,
        )

        assert 'could not be saved' in response.get_data(as_text=True)
        assert PageComponentRepository.get_by_id(component.id).properties == {'document_id': 'D1', 'content_id': 42}

    def test_cancel_returns_to_editor(self, client):
        response = client.post('/page/1/component', data={'cmd': 'cancel'})

        assert response.status_code == 302
        assert response.headers['Location'].endswith('/page/1/edit')
        assert PageComponent.query.count() == 0

    def test_unknown_command_fails_fast(self, client):
        response = client.get('/page/1/component?cmd=save&document_id=D1&content_id=42')

        assert response.status_code == 400
        assert response.get_json()['code'] == 'UNKNOWN_COMMAND'
        assert PageComponent.query.count() == 0

    def test_unknown_component(self, client):
        response = client.get('/page/1/component/77?cmd=edit')

        assert response.status_code == 404


class TestInactivePlugin:
    """Commands are refused while the plugin is inactive"""

    def test_commands_refused(self, app_settings):
        app_settings['plugin'] = {'active': False}
        app = create_app(app_settings)
        with app.app_context():
            db.session.add(Page(id=1, title='Lesson', parent_type='crs'))
            db.session.commit()

        with app.test_client() as client:
            response = client.get('/page/1/component?cmd=insert')

        assert response.status_code == 403
        assert response.get_json()['code'] == 'PLUGIN_NOT_ACTIVE'

    def test_execute_command_raises(self, app, mock_renderer):
        plugin = MagicMock()
        plugin.is_active.return_value = False
        gui = NolejPageComponentGUI(plugin, MagicMock(), MagicMock(), app.i18n, mock_renderer)

        with pytest.raises(PluginNotActiveException):
            gui.execute_command()
