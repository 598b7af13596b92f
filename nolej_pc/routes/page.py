"""
Page Routes - Page editor and presentation of plugged components
"""

import structlog
from flask import Blueprint, current_app, redirect, render_template, request, url_for

from nolej_pc.constants import MODE_EDIT, MODE_PRESENTATION, PAGE_MODES, PLUGIN_NAME
from nolej_pc.exceptions import ObjectNotFoundException
from nolej_pc.repositories.page_component_repository import PageComponentRepository
from nolej_pc.routes.page_component import build_page_component_gui
from nolej_pc.ui import MainTemplate

logger = structlog.get_logger('page')

page_bp = Blueprint("page", __name__, url_prefix="/page")


def _get_page(page_id):
    page = PageComponentRepository.get_page(page_id)
    if page is None:
        raise ObjectNotFoundException(f"Page {page_id} not found")
    return page


def _active_plugin(name):
    plugin = current_app.plugin_manager.get(name)
    if plugin is None or not plugin.is_active():
        return None
    return plugin


def render_elements(page, mode):
    elements = []
    for component in page.components:
        if _active_plugin(component.plugin_name) is None:
            continue

        gui, _ = build_page_component_gui(page, component)
        elements.append({
            "id": component.id,
            "html": gui.get_element_html(mode, component.properties, component.plugin_version),
            "edit_url": url_for("page_component.execute", page_id=page.id, pc_id=component.id, cmd="edit"),
            "delete_url": url_for("page.delete_component", page_id=page.id, pc_id=component.id),
        })
    return elements


@page_bp.route("/<int:page_id>")
def view(page_id):
    """Page in presentation, print, preview or offline mode"""
    page = _get_page(page_id)
    mode = request.args.get("mode", MODE_PRESENTATION)
    if mode not in PAGE_MODES or mode == MODE_EDIT:
        mode = MODE_PRESENTATION

    tpl = MainTemplate(page.title)
    tpl.set_content(render_template("page_view.html", elements=render_elements(page, mode)))
    return tpl.render()


@page_bp.route("/<int:page_id>/edit")
def edit(page_id):
    """Page editor"""
    page = _get_page(page_id)

    insert_url = None
    plugin = _active_plugin(PLUGIN_NAME)
    if plugin is not None and plugin.is_valid_parent_type(page.parent_type):
        insert_url = url_for("page_component.execute", page_id=page.id, cmd="insert")

    tpl = MainTemplate(f"{page.title} - {current_app.i18n.t('page_editor')}")
    tpl.set_content(render_template(
        "page_editor.html",
        elements=render_elements(page, MODE_EDIT),
        insert_url=insert_url,
    ))
    return tpl.render()


@page_bp.route("/<int:page_id>/component/<int:pc_id>/delete", methods=["POST"])
def delete_component(page_id, pc_id):
    page = _get_page(page_id)
    component = PageComponentRepository.get_by_id(pc_id)
    if component is None or component.page_id != page.id:
        raise ObjectNotFoundException(f"Page component {pc_id} not found")

    plugin = current_app.plugin_manager.get(component.plugin_name)
    if plugin is not None:
        plugin.on_delete(component.properties, component.plugin_version)

    PageComponentRepository.delete(pc_id)
    logger.info(f"Page component {pc_id} deleted from page {page_id}")
    return redirect(url_for("page.edit", page_id=page_id))


@page_bp.route("/<int:page_id>/clone", methods=["POST"])
def clone(page_id):
    _get_page(page_id)

    def clone_properties(component):
        plugin = current_app.plugin_manager.get(component.plugin_name)
        if plugin is None:
            return component.properties
        return plugin.on_clone(component.properties, component.plugin_version)

    copy = PageComponentRepository.clone_page(page_id, clone_properties)
    return redirect(url_for("page.edit", page_id=copy.id))
