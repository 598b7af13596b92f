"""
Command routing for page component controllers.

Commands travel in the `cmd` request value; `cmd_class` names the controller
below the page component that should receive the command.
"""
from flask import request, redirect, url_for

from nolej_pc.utils import append_query


class Ctrl:
    def __init__(self, page_id, pc_id=None, endpoint="page_component.execute", default_cmd=None):
        self.page_id = page_id
        self.pc_id = pc_id
        self.endpoint = endpoint
        self.default_cmd = default_cmd

    def get_cmd(self, default=None):
        return request.values.get("cmd") or default or self.default_cmd or ""

    def get_next_class(self, gui):
        """Class name the command is forwarded to, empty when `gui` handles it"""
        next_class = request.args.get("cmd_class", "")
        if next_class == getattr(gui, "CMD_CLASS", None):
            return ""
        return next_class

    def _base_url(self, gui, external=False):
        values = {"page_id": self.page_id}
        if self.pc_id is not None:
            values["pc_id"] = self.pc_id
        if getattr(gui, "FORWARDED", False):
            values["cmd_class"] = gui.CMD_CLASS
        return url_for(self.endpoint, _external=external, **values)

    def get_link_target(self, gui, cmd, external=False, **params):
        return append_query(self._base_url(gui, external), cmd=cmd, **params)

    def get_form_action(self, gui):
        return self._base_url(gui)

    def get_parent_url(self):
        return url_for("page.edit", page_id=self.page_id)

    def return_to_parent(self):
        """Back to the page editor"""
        return redirect(self.get_parent_url())
