"""
Activity selector.

Explorer over the repository tree where only Nolej objects with generated
activities can be picked. Picking an object opens a modal listing its
activities grouped by generation batch; choosing an activity follows the
target url with the selected document and content ids.
"""
import json
from typing import Any, Callable, Dict, List

import structlog
from flask import Response, render_template, request, url_for
from markupsafe import Markup

from nolej_pc.constants import EXPLORER_TYPE_WHITELIST, EXPLORER_CLICKABLE_TYPES, PLUGIN_ID
from nolej_pc.exceptions import UnknownCommandException, ObjectNotFoundException
from nolej_pc.repositories.activity_repository import ActivityRepository
from nolej_pc.repositories.nolej_object_repository import NolejObjectRepository
from nolej_pc.repositories.repository_tree_repository import RepositoryTreeRepository
from nolej_pc.ui import ExpandableTree, Modal, NodeFactory, SimpleNode, TreeRecursion
from nolej_pc.utils import append_query, format_timestamp

logger = structlog.get_logger('activity_selector')


def group_activities(rows, type_label: Callable[[str], str], date_label: Callable[[int], str]) -> List[Dict[str, Any]]:
    """Group (type, content_id, generated) rows by generation batch.

    Rows must be sorted by `generated`, so that activities of the same batch
    are contiguous. Only the first (most recent) group is marked expanded.
    """
    data = []
    last_timestamp = None
    for activity_type, content_id, generated in rows:
        if not data or generated != last_timestamp:
            last_timestamp = generated
            data.append({
                "label": date_label(generated),
                "content_id": None,
                "generated": generated,
                "expanded": not data,
                "children": [],
            })

        data[-1]["children"].append({
            "label": type_label(activity_type),
            "content_id": content_id,
            "children": [],
        })
    return data


class ActivityTreeRecursion(TreeRecursion):
    """Builds the two level activity tree: batches, then activities"""

    def get_children(self, record, environment=None):
        return record["children"]

    def build(self, factory: NodeFactory, record, environment=None) -> SimpleNode:
        node = factory.simple(record["label"])

        if len(record["children"]) == 0:
            node = node.with_link(append_query(environment["url"], content_id=record["content_id"]))

        if record.get("expanded"):
            node = node.with_expanded(True)

        return node


class RepositorySelectorExplorer:
    """Explorer over the repository tree, selecting one object"""
    CMD_CLASS = "repository_selector"

    def __init__(self, ctrl, tpl, lng, selection_gui=None, selection_cmd=""):
        self.ctrl = ctrl
        self.tpl = tpl
        self.lng = lng
        self.selection_gui = selection_gui
        self.selection_cmd = selection_cmd
        self.skip_root_node = False
        self.type_white_list: List[str] = []
        self.clickable_types: List[str] = []

    def set_skip_root_node(self, skip: bool):
        self.skip_root_node = skip

    def set_type_white_list(self, types: List[str]):
        self.type_white_list = list(types)

    def set_clickable_types(self, types: List[str]):
        self.clickable_types = list(types)

    def get_root_node(self):
        return RepositoryTreeRepository.get_root()

    def get_children(self, node):
        return RepositoryTreeRepository.get_children(node.ref_id, self.type_white_list)

    def is_node_clickable(self, node) -> bool:
        if self.clickable_types and node.type not in self.clickable_types:
            return False
        return True

    def get_node_href(self, node) -> str:
        gui = self.selection_gui or self
        return self.ctrl.get_link_target(gui, self.selection_cmd, sel_ref_id=node.ref_id)

    def get_node_on_click(self, node) -> str:
        return ""

    def build_nodes(self, nodes) -> List[Dict[str, Any]]:
        result = []
        for node in nodes:
            clickable = self.is_node_clickable(node)
            result.append({
                "obj": node,
                "clickable": clickable,
                "href": self.get_node_href(node) if clickable else None,
                "on_click": self.get_node_on_click(node) if clickable else None,
                "children": self.build_nodes(self.get_children(node)),
            })
        return result

    def get_html(self) -> Markup:
        root = self.get_root_node()
        if root is None:
            nodes = []
        elif self.skip_root_node:
            nodes = self.build_nodes(self.get_children(root))
        else:
            nodes = self.build_nodes([root])

        return Markup(render_template("explorer.html", explorer_id=f"exp_{self.CMD_CLASS}", nodes=nodes))


class ActivitySelectorGUI(RepositorySelectorExplorer):
    CMD_CLASS = "activity_selector"
    FORWARDED = True
    CMD_ACTIVITY_MODAL = "activityModal"

    def __init__(self, ctrl, tpl, lng, selection_gui=None, selection_cmd="", target_url=""):
        super().__init__(ctrl, tpl, lng, selection_gui, selection_cmd)
        self.target_url = target_url

        self.set_skip_root_node(True)
        self.set_type_white_list(EXPLORER_TYPE_WHITELIST)
        self.set_clickable_types(EXPLORER_CLICKABLE_TYPES)

    def get_html(self) -> Markup:
        self.tpl.add_javascript(url_for("static", filename="js/ui.js"))
        self.tpl.add_javascript(url_for("static", filename="js/activity_selector.js"))

        async_url = self.ctrl.get_link_target(self, self.CMD_ACTIVITY_MODAL)
        modal = Modal("", [""])
        replace_signal = modal.get_replace_signal().id
        modal = modal.with_additional_on_load_code(
            lambda modal_id: "pcnlj_setup_modal({}, {}, {})".format(
                json.dumps(modal_id), json.dumps(replace_signal), json.dumps(async_url)
            )
        )

        return modal.render() + super().get_html()

    def is_node_clickable(self, node) -> bool:
        if not super().is_node_clickable(node):
            # Not selectable by default.
            return False

        # Only objects with at least one generated activity
        document_id = NolejObjectRepository.get_document_id(node.ref_id)
        if document_id is None:
            return False
        return ActivityRepository.has_activities(document_id)

    def get_node_href(self, node) -> str:
        return "#"

    def get_node_on_click(self, node) -> str:
        return (
            "event.stopPropagation(); event.preventDefault(); "
            f"pcnlj_show_modal('{int(node.ref_id)}'); return false;"
        )

    def execute_command(self):
        cmd = self.ctrl.get_cmd()
        if cmd == self.CMD_ACTIVITY_MODAL:
            return self.activity_modal()

        raise UnknownCommandException(cmd)

    def activity_modal(self) -> Response:
        """Modal listing the activities of the selected object, as an async fragment"""
        ref_id = request.args.get("sel_ref_id", type=int)
        obj = NolejObjectRepository.get_by_ref_id(ref_id) if ref_id is not None else None
        if obj is None or obj.repository_object is None or obj.repository_object.type != PLUGIN_ID:
            raise ObjectNotFoundException(f"Nolej object {ref_id} not found")

        logger.debug(f"Activity modal for object {ref_id}, document {obj.document_id}")
        content = self.init_activity_tree(obj.document_id)
        modal = Modal(obj.repository_object.title, content)
        return Response(modal.render(), mimetype="text/html")

    def init_activity_tree(self, document_id) -> ExpandableTree:
        date_format = self.lng.t("date_format")
        data = group_activities(
            ActivityRepository.get_by_document(document_id),
            self.lng.activity_label,
            lambda timestamp: format_timestamp(timestamp, date_format),
        )

        return (
            ExpandableTree(self.lng.t("activities_tree"), ActivityTreeRecursion())
            .with_environment({"url": append_query(self.target_url, document_id=document_id)})
            .with_data(data)
            .with_highlight_on_node_click(True)
        )
