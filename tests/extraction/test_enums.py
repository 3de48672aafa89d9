"""Tests for direct and convention-based enum resolution."""

from __future__ import annotations

import pytest

from controlgen.extraction.enums import (
    EnumResolutionError,
    StringEnumOutcome,
    helper_member_name,
    lookup_string_enum,
    resolve_direct_enum,
)
from controlgen.models import EnumValues, Property, TypeDescriptor
from tests._fixtures.graph_builder import GraphBuilder


def test_resolve_direct_enum_returns_short_names_in_order(graph: GraphBuilder) -> None:
    descriptor = graph.enum("WinJS.UI.Foo.Mode", ["B", "A", "C"])

    values = resolve_direct_enum(graph.build().enums, descriptor)

    assert values == EnumValues(("B", "A", "C"))


def test_resolve_direct_enum_rejects_undeclared_enum() -> None:
    with pytest.raises(EnumResolutionError):
        resolve_direct_enum({}, TypeDescriptor(kind="enum", name="WinJS.UI.Missing"))


def test_helper_member_name_upper_cases_first_letter() -> None:
    assert helper_member_name("panePlacement") == "PanePlacement"
    assert helper_member_name("x") == "X"


def test_lookup_string_enum_resolves_static_helper(graph: GraphBuilder) -> None:
    graph.static_helper("WinJS.UI", "SplitView", "PanePlacement", ["left", "right", "top", "bottom"])

    lookup = lookup_string_enum(graph.build().env, "WinJS.UI.SplitView", "panePlacement", "WinJS.UI")

    assert lookup.resolved
    assert lookup.outcome is StringEnumOutcome.RESOLVED
    assert lookup.values == ("left", "right", "top", "bottom")


def test_lookup_string_enum_reports_missing_helper(graph: GraphBuilder) -> None:
    graph.static_helper("WinJS.UI", "SplitView", "PanePlacement", ["left"])

    lookup = lookup_string_enum(graph.build().env, "WinJS.UI.AppBar", "placement", "WinJS.UI")

    assert lookup.outcome is StringEnumOutcome.NO_HELPER
    assert not lookup.resolved


def test_lookup_string_enum_reports_missing_root_module(graph: GraphBuilder) -> None:
    lookup = lookup_string_enum(graph.build().env, "WinJS.UI.AppBar", "placement", "WinJS.UI")

    assert lookup.outcome is StringEnumOutcome.NO_HELPER


def test_lookup_string_enum_reports_missing_member(graph: GraphBuilder) -> None:
    graph.static_helper("WinJS.UI", "SplitView", "PanePlacement", ["left"])

    lookup = lookup_string_enum(graph.build().env, "WinJS.UI.SplitView", "label", "WinJS.UI")

    assert lookup.outcome is StringEnumOutcome.NO_MEMBER
    assert lookup.values == ()


def test_lookup_string_enum_resolves_member_without_values(graph: GraphBuilder) -> None:
    graph.static_helper("WinJS.UI", "SplitView", "Label", [])

    lookup = lookup_string_enum(graph.build().env, "WinJS.UI.SplitView", "label", "WinJS.UI")

    assert lookup.resolved
    assert lookup.values == ()


def test_lookup_string_enum_reports_member_that_is_not_an_object(graph: GraphBuilder) -> None:
    graph.static_helper("WinJS.UI", "SplitView", "Mode", ["overlay"])
    environment = graph.build()
    helper = environment.env["module:WinJS.UI"].properties["SplitView"]
    helper.type.properties["Label"] = Property(
        name="Label", type=TypeDescriptor(kind="builtin", name="string")
    )

    lookup = lookup_string_enum(environment.env, "WinJS.UI.SplitView", "label", "WinJS.UI")

    assert lookup.outcome is StringEnumOutcome.MEMBER_NOT_OBJECT
    assert lookup.values == ()


def test_lookup_string_enum_only_applies_to_direct_children_of_root(graph: GraphBuilder) -> None:
    graph.static_helper("WinJS.UI", "Pages", "Mode", ["a"])

    lookup = lookup_string_enum(graph.build().env, "WinJS.UI.Pages.PageControl", "mode", "WinJS.UI")

    assert lookup.outcome is StringEnumOutcome.NOT_A_CONTROL
