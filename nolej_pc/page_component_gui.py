"""
Page component controller.

Handles the page editor commands of the Nolej page component and renders the
selected activity inside the page.
"""
import structlog
from flask import request
from markupsafe import Markup
from sqlalchemy.exc import SQLAlchemyError

from nolej_pc.activity_selector import ActivitySelectorGUI
from nolej_pc.constants import MODE_EDIT, PROP_DOCUMENT_ID, PROP_CONTENT_ID, STATUS_COMPLETED
from nolej_pc.exceptions import UnknownCommandException, PluginNotActiveException
from nolej_pc.repositories.activity_repository import ActivityRepository
from nolej_pc.repositories.document_repository import DocumentRepository
from nolej_pc.repositories.page_component_repository import PageComponentRepository
from nolej_pc.ui import PropertyForm, RadioGroup, RadioOption
from nolej_pc.utils import format_timestamp

logger = structlog.get_logger('page_component')

MSG_ACTIVITY_NOT_FOUND = "Activity not found!"
MSG_ACTIVITY_NOT_EXISTS = "Activity does not exist!"


def _paragraph(text) -> Markup:
    return Markup("<p>{}</p>").format(text)


def _to_content_id(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class NolejPageComponentGUI:
    CMD_CLASS = "page_component"

    CMD_INSERT = "insert"
    CMD_CREATE = "create"
    CMD_EDIT = "edit"
    CMD_UPDATE = "update"
    CMD_CANCEL = "cancel"
    COMMANDS = (CMD_INSERT, CMD_CREATE, CMD_EDIT, CMD_UPDATE, CMD_CANCEL)

    def __init__(self, plugin, ctrl, tpl, lng, renderer, page=None, component=None):
        self.plugin = plugin
        self.ctrl = ctrl
        self.tpl = tpl
        self.lng = lng
        self.renderer = renderer
        self.page = page
        self.component = component

    def get_properties(self):
        return dict(self.component.properties or {}) if self.component else {}

    def execute_command(self):
        """Delegates incoming commands.

        Returns a response for commands ending in a redirect or an async
        fragment, None when the content was set on the template.
        """
        if not self.plugin.is_active():
            raise PluginNotActiveException()

        next_class = self.ctrl.get_next_class(self)
        if next_class == ActivitySelectorGUI.CMD_CLASS:
            return self.get_activity_selector(self.component is None).execute_command()
        if next_class:
            raise UnknownCommandException(f"{next_class}::{self.ctrl.get_cmd()}")

        cmd = self.ctrl.get_cmd()
        if cmd in self.COMMANDS:
            return getattr(self, cmd)()

        raise UnknownCommandException(cmd)

    def insert(self):
        """Form for a new page component element"""
        form = self.init_form(True)
        self.tpl.set_content(form.get_html())

    def create(self):
        """Save new page component element"""
        return self.save_and_return(True)

    def edit(self):
        """Form loaded with the stored selection"""
        form = self.init_form(False)
        self.tpl.set_content(form.get_html())

    def update(self):
        """Update page component element"""
        return self.save_and_return(False)

    def cancel(self):
        """Cancel the creation or the update and return to the editor"""
        return self.ctrl.return_to_parent()

    def get_activity_selector(self, a_create: bool) -> ActivitySelectorGUI:
        target_cmd = self.CMD_CREATE if a_create else self.CMD_UPDATE
        return ActivitySelectorGUI(
            self.ctrl,
            self.tpl,
            self.lng,
            selection_gui=self,
            selection_cmd=target_cmd,
            target_url=self.ctrl.get_link_target(self, target_cmd, external=True),
        )

    def init_form(self, a_create: bool) -> PropertyForm:
        """Selection form: activity selector, then the completed modules with their activities"""
        properties = self.get_properties()
        form = PropertyForm(self.lng.t("plugin_title"))

        form.add_item(self.get_activity_selector(a_create).get_html())

        modules = RadioGroup(self.lng.t("module_select"), PROP_DOCUMENT_ID, required=True)
        for document in DocumentRepository.get_completed():
            module = RadioOption(document.title, document.document_id)
            selected = not a_create and properties.get(PROP_DOCUMENT_ID) == document.document_id
            self.append_activities_list_form(module, document.document_id, selected)
            modules.add_option(module)

        if not a_create:
            modules.set_value(properties.get(PROP_DOCUMENT_ID))

        form.add_item(modules)

        form.set_form_action(self.ctrl.get_form_action(self))
        form.add_command_button(self.CMD_CREATE if a_create else self.CMD_UPDATE, self.lng.t("cmd_choose"))
        form.add_command_button(self.CMD_CANCEL, self.lng.t("cmd_cancel"))
        return form

    def append_activities_list_form(self, module: RadioOption, document_id: str, module_selected: bool):
        activities = RadioGroup(self.lng.t("activities_select"), PROP_CONTENT_ID, required=True)
        date_format = self.lng.t("date_format")

        for activity_type, content_id, generated in ActivityRepository.get_by_document(document_id):
            activity = RadioOption(self.lng.activity_label(activity_type), content_id)
            activity.set_info(format_timestamp(generated, date_format))
            activities.add_option(activity)

        if module_selected:
            activities.set_value(self.get_properties().get(PROP_CONTENT_ID))
        module.add_sub_item(activities)

    def save_and_return(self, a_create: bool):
        """Persist the requested selection and go back to the page editor in any case"""
        document_id = request.values.get(PROP_DOCUMENT_ID)
        content_id = request.values.get(PROP_CONTENT_ID)

        if self.save_selection(document_id, content_id, a_create):
            message = "msg_obj_created" if a_create else "msg_obj_modified"
            self.tpl.set_on_screen_message("success", self.lng.t(message), True)
        else:
            self.tpl.set_on_screen_message("failure", self.lng.t("msg_obj_not_saved"), True)

        return self.ctrl.return_to_parent()

    def save_selection(self, document_id, content_id, a_create: bool) -> bool:
        content_id = _to_content_id(content_id)
        if not document_id or content_id is None:
            logger.warning(f"Incomplete selection: document={document_id!r} content={content_id!r}")
            return False

        if ActivityRepository.find_selection(content_id, document_id, status=STATUS_COMPLETED) is None:
            logger.warning(f"Activity {content_id} is not selectable from document {document_id}")
            return False

        properties = {
            PROP_DOCUMENT_ID: document_id,
            PROP_CONTENT_ID: content_id,
        }

        if a_create:
            return self.create_element(properties)

        return self.update_element(properties)

    def create_element(self, properties) -> bool:
        if self.page is None or not self.plugin.is_valid_parent_type(self.page.parent_type):
            return False

        try:
            self.component = PageComponentRepository.create(
                self.page.id, self.plugin.get_plugin_name(), self.plugin.version, properties
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to create page component on page {self.page.id}: {e}")
            return False

        logger.info(f"Page component {self.component.id} created on page {self.page.id}")
        return True

    def update_element(self, properties) -> bool:
        if self.component is None:
            return False

        try:
            item = PageComponentRepository.update(self.component.id, self.plugin.version, properties)
        except SQLAlchemyError as e:
            logger.error(f"Failed to update page component {self.component.id}: {e}")
            return False

        return item is not None

    def get_element_html(self, mode, properties, plugin_version) -> Markup:
        """HTML of the page component element depending on the page mode

        Args:
            mode: page mode (edit, presentation, print, preview, offline)
            properties: properties of the page component
            plugin_version: plugin version of the properties
        """
        properties = properties or {}
        content_id = properties.get(PROP_CONTENT_ID)

        if content_id is None or content_id == "":
            return _paragraph(MSG_ACTIVITY_NOT_FOUND)

        if mode != MODE_EDIT:
            content_id = _to_content_id(content_id)
            if content_id is None:
                return _paragraph(MSG_ACTIVITY_NOT_FOUND)
            return Markup(self.renderer.get_html(content_id))

        row = None
        if _to_content_id(content_id) is not None:
            row = ActivityRepository.find_selection(_to_content_id(content_id), properties.get(PROP_DOCUMENT_ID))

        if row is not None:
            return _paragraph(self.lng.txt(
                "activities_selected",
                type=self.lng.activity_label(row.type),
                title=row.title,
            ))

        return _paragraph(MSG_ACTIVITY_NOT_EXISTS)
