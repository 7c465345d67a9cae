"""
dom.py
------
A minimal document tree: elements with text, inline style and children,
serialized to escaped HTML. Two elements carry extra state:
- SelectControl: current value + append-only (value, label) options
- ResultsContainer: children replaced wholesale, guarded by a render ticket
"""

from __future__ import annotations

import threading
from html import escape
from typing import Dict, List, Optional, Tuple

from src.config import ALL_ROCKETS_LABEL


class Element:
    def __init__(self, tag: str, text: str = "", style: Optional[Dict[str, str]] = None, **attrs: str):
        self.tag = tag
        self.text = text
        self.style: Dict[str, str] = dict(style or {})
        self.attrs: Dict[str, str] = dict(attrs)
        self.children: List["Element"] = []

    def append_child(self, child: "Element") -> "Element":
        self.children.append(child)
        return child

    @property
    def text_content(self) -> str:
        return self.text + "".join(c.text_content for c in self.children)

    def to_html(self) -> str:
        attrs = dict(self.attrs)
        if self.style:
            attrs["style"] = "; ".join(f"{k}: {v}" for k, v in self.style.items())
        rendered = "".join(f' {k.rstrip("_").replace("_", "-")}="{escape(v)}"' for k, v in attrs.items())
        inner = escape(self.text) + "".join(c.to_html() for c in self.children)
        return f"<{self.tag}{rendered}>{inner}</{self.tag}>"


class SelectControl(Element):
    """<select> whose options are only ever appended."""

    def __init__(self, id: str = "rocket-select", name: str = "rocket"):
        super().__init__("select", id=id, name=name)
        self.value = ""
        self.add_option("", ALL_ROCKETS_LABEL)

    def add_option(self, value: str, label: str) -> None:
        self.append_child(Element("option", label, value=value))

    @property
    def options(self) -> List[Tuple[str, str]]:
        return [(o.attrs["value"], o.text) for o in self.children]

    def with_value(self, value: str) -> "SelectControl":
        """Independent control over a snapshot of the current options."""
        view = SelectControl(self.attrs["id"], self.attrs["name"])
        view.children = list(self.children)
        view.value = value
        return view

    def to_html(self) -> str:
        # shared option elements are never mutated; "selected" goes on copies
        select = Element(self.tag, **self.attrs)
        for opt in self.children:
            attrs = dict(opt.attrs)
            if self.value and attrs["value"] == self.value:
                attrs["selected"] = "selected"
            select.append_child(Element(opt.tag, opt.text, **attrs))
        return select.to_html()


class ResultsContainer(Element):
    """<div> of launch cards.

    Each render takes a ticket before its request goes out; only the holder
    of the newest ticket may replace the children.
    """

    def __init__(self, id: str = "launches-container"):
        super().__init__("div", id=id)
        self.lock = threading.Lock()
        self._issued = 0

    def next_ticket(self) -> int:
        with self.lock:
            self._issued += 1
            return self._issued

    def is_current(self, ticket: int) -> bool:
        return ticket == self._issued

    def replace_children(self, children: List[Element]) -> None:
        self.children = list(children)


class LaunchPage:
    """The whole document: heading, rocket selection form and results."""

    title = "Upcoming Rocket Launches"

    def __init__(self, select: Optional[SelectControl] = None) -> None:
        self.select = select if select is not None else SelectControl()
        self.container = ResultsContainer()

    def to_html(self) -> str:
        form = Element("form", action="/launches", method="get")
        form.append_child(Element("label", "Rocket: ", for_="rocket-select"))
        form.append_child(self.select)
        form.append_child(Element("button", "Fetch Launches", id="fetch-launches-btn", type="submit"))
        body = Element("body")
        body.append_child(Element("h1", self.title))
        body.append_child(form)
        body.append_child(self.container)
        return (
            "<!DOCTYPE html>"
            f'<html lang="en"><head><meta charset="utf-8"><title>{escape(self.title)}</title></head>'
            f"{body.to_html()}</html>"
        )
