"""
Tests for Node / DynamicValue serialization.

Sparse emission of ``props`` / ``children`` is a wire-compatibility rule:
the renderer reads an absent key as "none", so an empty object or array in
its place is a break.
"""

from __future__ import annotations

import json
import math

import pytest

from report_kernel.domain.node import element, text
from report_kernel.domain.serializer import (
    deserialize_value,
    serialize_node,
    serialize_value,
    stringify,
    stringify_value,
)
from report_kernel.domain.tags import Button, Column, Space, Table, div, h1
from report_kernel.domain.values import Boolean, List, Map, Number, Text


class TestValueSerialization:
    """DynamicValue -> JSON-equivalent data."""

    def test_scalars(self):
        assert serialize_value(Text("x")) == "x"
        assert serialize_value(Number(2)) == 2.0
        assert serialize_value(Boolean(False)) is False

    def test_number_not_truncated(self):
        assert serialize_value(Number(1.239)) == 1.239

    def test_nested_preserves_order(self):
        value = Map({
            "b": List((Number(1), Text("two"))),
            "a": Map({"z": Boolean(True), "y": Text("")}),
        })
        out = serialize_value(value)
        assert list(out) == ["b", "a"]
        assert list(out["a"]) == ["z", "y"]
        assert out == {"b": [1.0, "two"], "a": {"z": True, "y": ""}}

    def test_empty_collections_kept_inside_values(self):
        assert serialize_value(Map({"rows": List(())})) == {"rows": []}
        assert serialize_value(Map({})) == {}

    def test_unknown_value_rejected(self):
        with pytest.raises(TypeError, match="Not a dynamic value"):
            serialize_value("raw string")  # type: ignore[arg-type]

    def test_stringify_value_is_compact(self):
        assert stringify_value(Map({"a": List((Number(1),))})) == '{"a":[1.0]}'

    @pytest.mark.parametrize("number", [math.nan, math.inf, -math.inf])
    def test_stringify_rejects_non_finite(self, number):
        with pytest.raises(ValueError):
            stringify_value(List((Number(number),)))
        with pytest.raises(ValueError):
            stringify(div(props={"width": Number(number)}))

    def test_deserialize(self):
        assert deserialize_value({"a": [1, "x", True]}) == Map({
            "a": List((Number(1.0), Text("x"), Boolean(True))),
        })

    def test_deserialize_rejects_null(self):
        with pytest.raises(TypeError):
            deserialize_value(None)


class TestNodeSerialization:
    """Node -> ``{type, props?, children?}``."""

    def test_text_node_exact(self):
        assert stringify(text("Close")) == '{"type":"#text","props":{"value":"Close"}}'

    def test_bare_node_has_only_type(self):
        assert serialize_node(div()) == {"type": "div"}

    def test_props_without_children(self):
        assert serialize_node(div(props={"id": "x"})) == {"type": "div", "props": {"id": "x"}}

    def test_children_without_props(self):
        out = serialize_node(h1([text("Title")]))
        assert "props" not in out
        assert out["children"] == [{"type": "#text", "props": {"value": "Title"}}]

    def test_key_order(self):
        out = serialize_node(div([text("x")], {"id": "y"}))
        assert list(out) == ["type", "props", "children"]

    def test_deep_tree(self):
        tree = Column([h1([text("T")]), Table(props={"name": "X", "showTotal": True})])
        assert serialize_node(tree) == {
            "type": "Column",
            "children": [
                {"type": "h1", "children": [{"type": "#text", "props": {"value": "T"}}]},
                {"type": "Table", "props": {"name": "X", "showTotal": True}},
            ],
        }

    def test_modal_footer_shape(self):
        footer = Space(
            [Button([text("Close")], {"onClick": '{"action":"CloseModal"}'})],
            {"justifyContent": "space-between"},
        )
        out = json.loads(stringify(footer))
        assert out["props"] == {"justifyContent": "space-between"}
        assert out["children"][0]["props"]["onClick"] == '{"action":"CloseModal"}'

    def test_unicode_not_escaped(self):
        assert stringify(text("Сделки")) == '{"type":"#text","props":{"value":"Сделки"}}'

    def test_stringify_is_deterministic(self):
        tree = element("section", [text("a"), text("b")], {"k": [1, 2]})
        assert stringify(tree) == stringify(tree)
