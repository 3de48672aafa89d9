"""Tests for the tree-sitter declaration provider."""

from __future__ import annotations

import textwrap

import pytest

from controlgen.config import BASELINE_PATH
from controlgen.environment import ProviderError, SourceText, TreeSitterProvider
from controlgen.models import TypeEnvironment


def _load(*texts: str) -> TypeEnvironment:
    sources = [
        SourceText(identifier=f"source{index}.d.ts", text=textwrap.dedent(text))
        for index, text in enumerate(texts)
    ]
    return TreeSitterProvider().load(sources)


SPLIT_VIEW = """
declare module WinJS.UI {
    enum Orientation {
        horizontal,
        vertical
    }

    class SplitView {
        constructor(element?: HTMLElement, options?: any);
        static PanePlacement: {
            left: string;
            right: string;
            top: string;
            bottom: string;
        };
        element: HTMLElement;
        panePlacement: string;
        paneOpened: boolean;
        orientation: Orientation;
        items: Array<string>;
        onbeforeopen(eventInfo: CustomEvent): void;
        showPane(): void;
    }
}
"""


def test_provider_registers_classes_with_instance_members() -> None:
    environment = _load(SPLIT_VIEW)

    split_view = environment.env["WinJS.UI.SplitView"]
    assert split_view.kind == "object"
    assert split_view.role == "class"
    assert list(split_view.properties) == [
        "element",
        "panePlacement",
        "paneOpened",
        "orientation",
        "items",
        "onbeforeopen",
        "showPane",
    ]
    assert split_view.properties["paneOpened"].type.kind == "builtin"
    assert split_view.properties["paneOpened"].type.name == "boolean"
    assert split_view.properties["element"].type.kind == "reference"
    assert split_view.properties["element"].type.name == "HTMLElement"


def test_provider_exposes_static_side_on_module() -> None:
    environment = _load(SPLIT_VIEW)

    module = environment.env["module:WinJS.UI"]
    assert module.role == "module"
    static_side = module.properties["SplitView"].type
    placement = static_side.properties["PanePlacement"].type
    assert list(placement.properties) == ["left", "right", "top", "bottom"]
    assert "UI" in environment.env["module:WinJS"].properties


def test_provider_collects_enums_and_resolves_references() -> None:
    environment = _load(SPLIT_VIEW)

    assert environment.enums["WinJS.UI.Orientation"] == [
        "WinJS.UI.Orientation.horizontal",
        "WinJS.UI.Orientation.vertical",
    ]
    orientation = environment.env["WinJS.UI.SplitView"].properties["orientation"].type
    assert orientation.kind == "enum"
    assert orientation.name == "WinJS.UI.Orientation"


def test_provider_models_methods_as_function_shaped_properties() -> None:
    environment = _load(SPLIT_VIEW)

    event = environment.env["WinJS.UI.SplitView"].properties["onbeforeopen"].type
    assert event.kind == "object"
    assert len(event.calls) == 1
    parameter = event.calls[0].parameters[0]
    assert parameter.name == "eventInfo"
    assert parameter.type.name == "CustomEvent"
    assert event.calls[0].return_type is not None
    assert event.calls[0].return_type.name == "void"


def test_provider_models_generic_references() -> None:
    environment = _load(SPLIT_VIEW)

    items = environment.env["WinJS.UI.SplitView"].properties["items"].type
    assert items.kind == "reference"
    assert items.name == "Array"
    assert [arg.name for arg in items.type_arguments] == ["string"]


def test_provider_resolves_enums_declared_in_later_sources() -> None:
    environment = _load(
        """
        declare module WinJS.UI {
            class Foo {
                mode: Foo.Mode;
            }
        }
        """,
        """
        declare module WinJS.UI.Foo {
            enum Mode {
                A,
                B = 2
            }
        }
        """,
    )

    mode = environment.env["WinJS.UI.Foo"].properties["mode"].type
    assert mode.kind == "enum"
    assert mode.name == "WinJS.UI.Foo.Mode"
    assert environment.enums["WinJS.UI.Foo.Mode"] == ["WinJS.UI.Foo.Mode.A", "WinJS.UI.Foo.Mode.B"]


def test_provider_merges_repeated_module_blocks() -> None:
    environment = _load(
        """
        declare module WinJS.UI {
            class AppBar {
                closedDisplayMode: string;
            }
        }
        declare module WinJS.UI {
            class Rating {
                maxRating: number;
            }
        }
        """
    )

    module = environment.env["module:WinJS.UI"]
    assert {"AppBar", "Rating"} <= set(module.properties)
    assert environment.env["WinJS.UI.Rating"].properties["maxRating"].type.name == "number"


def test_provider_tags_unmodelled_type_shapes() -> None:
    environment = _load(
        """
        declare module WinJS.UI {
            class Repeater<T> {
                data: T;
                template: string | Function;
                size: [number, number];
            }
        }
        """
    )

    properties = environment.env["WinJS.UI.Repeater"].properties
    assert properties["data"].type.kind == "type-parameter"
    assert properties["template"].type.kind == "union"
    assert properties["size"].type.kind == "tuple"


def test_provider_handles_accessors_and_function_types() -> None:
    environment = _load(
        """
        declare module WinJS.UI {
            class Flyout {
                get hidden(): boolean;
                set anchor(value: HTMLElement);
                onafterhide: (eventInfo: CustomEvent) => void;
            }
        }
        """
    )

    properties = environment.env["WinJS.UI.Flyout"].properties
    assert properties["hidden"].type.name == "boolean"
    assert properties["anchor"].type.name == "HTMLElement"
    assert properties["onafterhide"].type.kind == "object"
    assert len(properties["onafterhide"].type.calls) == 1


def test_provider_parses_bundled_baseline() -> None:
    environment = TreeSitterProvider().load(
        [SourceText(identifier="lib.d.ts", text=BASELINE_PATH.read_text(encoding="utf-8"))]
    )

    html_element = environment.env["HTMLElement"]
    assert html_element.role == "interface"
    assert "focus" in html_element.properties


def test_provider_reports_syntax_errors_with_location() -> None:
    with pytest.raises(ProviderError) as excinfo:
        _load("declare module WinJS.UI {\n    class Foo {\n        title: ;\n    }\n}\n")

    assert "source0.d.ts:" in str(excinfo.value)
