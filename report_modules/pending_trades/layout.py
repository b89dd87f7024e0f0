"""
Modal envelope for report documents.

The host renders report output inside a modal window:

    {"ui": {"modal": {"size": ..., "headerContent": [...],
                      "footerContent": [...], "content": [...]}}}

Header and footer are built from the same Node catalog as the report body
so they follow the sparse-emission rule.
"""

from __future__ import annotations

import json
from typing import Any

from report_kernel.domain.node import Node, text
from report_kernel.domain.serializer import serialize_node
from report_kernel.domain.tags import Button, Space

CLOSE_MODAL_ACTION = json.dumps({"action": "CloseModal"}, separators=(",", ":"))


def build_header(title: str) -> Node:
    return Space([text(title)])


def build_footer() -> Node:
    """Right-aligned close button."""
    close_button = Button(
        [text("Close")],
        {
            "className": "form_action_button",
            "borderType": "danger",
            "buttonType": "outlined",
            # The renderer expects the action as a JSON string
            "onClick": CLOSE_MODAL_ACTION,
        },
    )
    return Space([close_button], {"justifyContent": "space-between"})


def build_modal(content: Node, *, header_title: str, size: str = "xxxl") -> dict[str, Any]:
    """Wrap ``content`` into the host's ``ui.modal`` response object."""
    return {
        "ui": {
            "modal": {
                "size": size,
                "headerContent": [serialize_node(build_header(header_title))],
                "footerContent": [serialize_node(build_footer())],
                "content": [serialize_node(content)],
            }
        }
    }
