"""Default tables describing the WinJS control surface."""

from __future__ import annotations

DEFAULT_NAMESPACE_ROOT = "WinJS.UI"
DEFAULT_OUTPUT_VARIABLE = "RawControlApis"
DEFAULT_EXCLUDED_SUFFIX = "element"

BUILTIN_TYPE_NAMES: frozenset[str] = frozenset({"number", "string", "boolean", "void", "any"})

EVENT_PREFIX = "on"
EVENT_MARKER = "Function"

# Controls whose metadata shape is incompatible with the catalog.
EXCLUDED_NAMESPACES: tuple[str, ...] = (
    "WinJS.UI.DOMEventMixin",
    "WinJS.UI.HtmlControl",
    "WinJS.UI.Layout",
    "WinJS.UI.MediaElementAdapter",
    "WinJS.UI.MediaPlayer",
    "WinJS.UI.Repeater",
    "WinJS.UI.SettingsFlyout",
    "WinJS.UI.StorageDataSource",
    "WinJS.UI.TabContainer",
    "WinJS.UI.ViewBox",
    "WinJS.UI.VirtualizedDataSource",
)

EVENT_NAME_CAPITALIZATION: dict[str, str] = {
    "onaccessibilityannotationcomplete": "onAccessibilityAnnotationComplete",
    "onafterclose": "onAfterClose",
    "onafterhide": "onAfterHide",
    "onafteropen": "onAfterOpen",
    "onaftershow": "onAfterShow",
    "onbeforeclose": "onBeforeClose",
    "onbeforehide": "onBeforeHide",
    "onbeforeopen": "onBeforeOpen",
    "onbeforeshow": "onBeforeShow",
    "oncancel": "onCancel",
    "onchange": "onChange",
    "onchildrenprocessed": "onChildrenProcessed",
    "onclick": "onClick",
    "onclosed": "onClosed",
    "oncontentanimating": "onContentAnimating",
    "ondatasourcecountchanged": "onDataSourceCountChanged",
    "onfootervisibilitychanged": "onFooterVisibilityChanged",
    "ongroupheaderinvoked": "onGroupHeaderInvoked",
    "onheaderinvoked": "onHeaderInvoked",
    "onheadervisibilitychanged": "onHeaderVisibilityChanged",
    "oninvoked": "onInvoked",
    "onitemanimationend": "onItemAnimationEnd",
    "onitemanimationstart": "onItemAnimationStart",
    "onitemdragbetween": "onItemDragBetween",
    "onitemdragchanged": "onItemDragChanged",
    "onitemdragdrop": "onItemDragDrop",
    "onitemdragend": "onItemDragEnd",
    "onitemdragenter": "onItemDragEnter",
    "onitemdragleave": "onItemDragLeave",
    "onitemdragstart": "onItemDragStart",
    "oniteminvoked": "onItemInvoked",
    "onkeyboardnavigating": "onKeyboardNavigating",
    "onloadingstatechanged": "onLoadingStateChanged",
    "onopened": "onOpened",
    "onpagecompleted": "onPageCompleted",
    "onpageselected": "onPageSelected",
    "onpagevisibilitychanged": "onPageVisibilityChanged",
    "onpreviewchange": "onPreviewChange",
    "onquerychanged": "onQueryChanged",
    "onquerysubmitted": "onQuerySubmitted",
    "onreceivingfocusonkeyboardinput": "onReceivingFocusOnKeyboardInput",
    "onresultsuggestionchosen": "onResultSuggestionChosen",
    "onresultsuggestionschosen": "onResultSuggestionsChosen",
    "onselectionchanged": "onSelectionChanged",
    "onselectionchanging": "onSelectionChanging",
    "onsplittoggle": "onSplitToggle",
    "onsuggestionsrequested": "onSuggestionsRequested",
    "onzoomchanged": "onZoomChanged",
}


__all__ = [
    "BUILTIN_TYPE_NAMES",
    "DEFAULT_EXCLUDED_SUFFIX",
    "DEFAULT_NAMESPACE_ROOT",
    "DEFAULT_OUTPUT_VARIABLE",
    "EVENT_MARKER",
    "EVENT_NAME_CAPITALIZATION",
    "EVENT_PREFIX",
    "EXCLUDED_NAMESPACES",
]
