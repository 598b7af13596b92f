"""
UI components used by the page component.

Small counterparts of the host UI library: modal, expandable tree, radio
groups and property form. Every component renders to HTML through the
Jinja templates in `templates/ui/`.
"""
import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Optional

from flask import flash, render_template
from markupsafe import Markup


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def render_all(components) -> Markup:
    """Render a component, a string, or a list of both"""
    if components is None:
        return Markup("")
    if isinstance(components, (list, tuple)):
        return Markup("").join(render_all(c) for c in components)
    if hasattr(components, "render"):
        return components.render()
    return Markup(components)


class Signal:
    def __init__(self, name: str):
        self.id = _new_id(name)


class Modal:
    """Roundtrip modal. Its content can be replaced from an async url."""
    def __init__(self, title: str, content=None):
        self.id = _new_id("il_ui_modal")
        self.title = title
        self.content = content if content is not None else []
        self.replace_signal = Signal("replace")
        self.on_load_code: Optional[Callable[[str], str]] = None

    def get_replace_signal(self) -> Signal:
        return self.replace_signal

    def with_additional_on_load_code(self, code: Callable[[str], str]) -> "Modal":
        self.on_load_code = code
        return self

    def render(self) -> Markup:
        on_load = Markup(self.on_load_code(self.id)) if self.on_load_code else None
        return Markup(render_template(
            "ui/modal.html",
            modal=self,
            body=render_all(self.content),
            on_load=on_load,
        ))


@dataclass
class SimpleNode:
    label: str
    link: Optional[str] = None
    expanded: bool = False
    children: List["SimpleNode"] = field(default_factory=list)

    def with_link(self, link: str) -> "SimpleNode":
        return replace(self, link=link)

    def with_expanded(self, expanded: bool) -> "SimpleNode":
        return replace(self, expanded=expanded)

    def with_children(self, children: List["SimpleNode"]) -> "SimpleNode":
        return replace(self, children=list(children))


class NodeFactory:
    def simple(self, label: str) -> SimpleNode:
        return SimpleNode(label=label)


class TreeRecursion:
    """Interface used by ExpandableTree to walk its data"""

    def get_children(self, record, environment=None) -> List[Any]:
        raise NotImplementedError

    def build(self, factory: NodeFactory, record, environment=None) -> SimpleNode:
        raise NotImplementedError


class ExpandableTree:
    def __init__(self, label: str, recursion: TreeRecursion):
        self.id = _new_id("il_ui_tree")
        self.label = label
        self.recursion = recursion
        self.environment: Dict[str, Any] = {}
        self.data: List[Any] = []
        self.highlight_on_node_click = False

    def with_environment(self, environment: Dict[str, Any]) -> "ExpandableTree":
        self.environment = environment
        return self

    def with_data(self, data: List[Any]) -> "ExpandableTree":
        self.data = data
        return self

    def with_highlight_on_node_click(self, highlight: bool) -> "ExpandableTree":
        self.highlight_on_node_click = highlight
        return self

    def build_nodes(self, records=None) -> List[SimpleNode]:
        factory = NodeFactory()
        nodes = []
        for record in self.data if records is None else records:
            node = self.recursion.build(factory, record, self.environment)
            children = self.recursion.get_children(record, self.environment)
            if children:
                node = node.with_children(self.build_nodes(children))
            nodes.append(node)
        return nodes

    def render(self) -> Markup:
        return Markup(render_template("ui/tree.html", tree=self, nodes=self.build_nodes()))


@dataclass
class RadioOption:
    title: str
    value: Any
    info: Optional[str] = None
    sub_items: List["RadioGroup"] = field(default_factory=list)

    def set_info(self, info: str):
        self.info = info

    def add_sub_item(self, item: "RadioGroup"):
        self.sub_items.append(item)


@dataclass
class RadioGroup:
    title: str
    post_var: str
    required: bool = False
    value: Any = None
    options: List[RadioOption] = field(default_factory=list)

    def add_option(self, option: RadioOption):
        self.options.append(option)

    def set_value(self, value):
        self.value = value

    def is_checked(self, option: RadioOption) -> bool:
        return self.value is not None and str(self.value) == str(option.value)

    def render(self) -> Markup:
        return Markup(render_template("ui/radio_group.html", group=self))


class PropertyForm:
    def __init__(self, title: str = ""):
        self.title = title
        self.items: List[Any] = []
        self.form_action = ""
        self.command_buttons: List[Dict[str, str]] = []

    def add_item(self, item):
        self.items.append(item)

    def set_form_action(self, action: str):
        self.form_action = action

    def add_command_button(self, cmd: str, label: str):
        self.command_buttons.append({"cmd": cmd, "label": label})

    def get_html(self) -> Markup:
        return Markup(render_template(
            "ui/form.html",
            form=self,
            items=[render_all(item) for item in self.items],
        ))


class MainTemplate:
    """Collects the output of a command and renders the page around it"""
    def __init__(self, title: str = ""):
        self.title = title
        self.content = Markup("")
        self.javascripts: List[str] = []
        self.messages: List[Dict[str, str]] = []

    def set_content(self, html):
        self.content = Markup(html)

    def add_javascript(self, path: str):
        if path not in self.javascripts:
            self.javascripts.append(path)

    def set_on_screen_message(self, message_type: str, text: str, keep: bool = False):
        """Show a message; kept messages survive the next redirect"""
        if keep:
            flash(text, message_type)
        else:
            self.messages.append({"type": message_type, "text": text})

    def render(self) -> str:
        return render_template(
            "page.html",
            title=self.title,
            content=self.content,
            javascripts=self.javascripts,
            messages=self.messages,
        )
