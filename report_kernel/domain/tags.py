"""
Tag catalog -- named constructors for every supported element type.

Each table below is the single source of truth for its tag family:
one ``(function_name, type_string)`` pair per tag.  ``make_tag`` turns a
type string into a constructor with the shared signature
``(children=(), props=None) -> Node`` and the loop at the bottom of the
module publishes one function per entry.  Adding a tag means adding a
row, nothing else.

    from report_kernel.domain.tags import Column, Table, h1
    from report_kernel.domain.node import text

    Column([h1([text("Pending Trades Report")]), Table(props=table_props)])
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from report_kernel.domain.node import Node, PropsLike, element

TagConstructor = Callable[..., Node]

# Generic HTML / SVG elements: function name == type string
HTML_TAGS: tuple[tuple[str, str], ...] = tuple(
    (name, name)
    for name in (
        "div", "span", "p",
        "h1", "h2", "h3", "h4", "h5", "h6",
        "ul", "ol", "li",
        "table", "thead", "tfoot", "tbody", "tr", "td", "th",
        "img", "a",
        "button", "input", "label", "form", "select", "option",
        "section", "article", "header", "footer", "main", "nav",
        "svg", "path", "rect", "circle", "line", "g",
    )
)

# Charting components, namespaced for the renderer
RECHARTS_TAGS: tuple[tuple[str, str], ...] = tuple(
    (name, f"Recharts.{name}")
    for name in (
        "ResponsiveContainer",
        "LineChart", "BarChart", "PieChart", "AreaChart",
        "XAxis", "YAxis", "ZAxis",
        "Tooltip", "Legend",
        "Line", "Bar", "Pie", "Area", "Cell",
        "CartesianGrid", "Brush", "ReferenceLine", "ReferenceDot",
        "ComposedChart", "ScatterChart", "Scatter",
        "RadarChart", "Radar", "PolarGrid", "PolarAngleAxis", "PolarRadiusAxis",
    )
)

# Report-domain components
CUSTOM_TAGS: tuple[tuple[str, str], ...] = (
    ("Table", "Table"),
    ("Column", "Column"),
    ("Space", "Space"),
    ("Button", "Button"),
)


def make_tag(type_name: str, function_name: str | None = None) -> TagConstructor:
    """Return a constructor that builds ``type_name`` nodes."""

    def constructor(
        children: Iterable[Node] = (),
        props: PropsLike = None,
    ) -> Node:
        return element(type_name, children, props)

    constructor.__name__ = function_name or type_name
    constructor.__qualname__ = constructor.__name__
    constructor.__doc__ = f"Build a ``{type_name}`` node."
    return constructor


TAG_TYPES: dict[str, str] = {}

for _name, _type in HTML_TAGS + RECHARTS_TAGS + CUSTOM_TAGS:
    if _name in TAG_TYPES:
        raise RuntimeError(f"Duplicate tag constructor name: {_name}")
    TAG_TYPES[_name] = _type
    globals()[_name] = make_tag(_type, _name)

del _name, _type

__all__ = ["HTML_TAGS", "RECHARTS_TAGS", "CUSTOM_TAGS", "TAG_TYPES", "make_tag", *TAG_TYPES]
