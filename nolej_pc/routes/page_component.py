"""
Page Component Routes - Commands of the Nolej page component
"""

from flask import Blueprint, current_app

from nolej_pc.constants import PLUGIN_NAME
from nolej_pc.ctrl import Ctrl
from nolej_pc.exceptions import ObjectNotFoundException
from nolej_pc.page_component_gui import NolejPageComponentGUI
from nolej_pc.repositories.page_component_repository import PageComponentRepository
from nolej_pc.ui import MainTemplate

page_component_bp = Blueprint("page_component", __name__)


def build_page_component_gui(page, component=None, default_cmd=None):
    """Controller for a page (insertion) or one of its components (editing)"""
    plugin = current_app.plugin_manager.get(PLUGIN_NAME)
    ctrl = Ctrl(page.id, component.id if component else None, default_cmd=default_cmd)
    tpl = MainTemplate(current_app.i18n.t("plugin_title"))
    gui = NolejPageComponentGUI(plugin, ctrl, tpl, current_app.i18n, current_app.h5p_renderer, page, component)
    return gui, tpl


@page_component_bp.route("/page/<int:page_id>/component", methods=["GET", "POST"])
@page_component_bp.route("/page/<int:page_id>/component/<int:pc_id>", methods=["GET", "POST"])
def execute(page_id, pc_id=None):
    page = PageComponentRepository.get_page(page_id)
    if page is None:
        raise ObjectNotFoundException(f"Page {page_id} not found")

    component = None
    if pc_id is not None:
        component = PageComponentRepository.get_by_id(pc_id)
        if component is None or component.page_id != page.id:
            raise ObjectNotFoundException(f"Page component {pc_id} not found")

    default_cmd = NolejPageComponentGUI.CMD_INSERT if component is None else NolejPageComponentGUI.CMD_EDIT
    gui, tpl = build_page_component_gui(page, component, default_cmd)

    response = gui.execute_command()
    if response is not None:
        return response
    return tpl.render()
