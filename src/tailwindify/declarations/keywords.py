"""Static keyword utilities: CSS value -> utility class(es) per property.

Values holding a space-separated list expand to several classes
(``scroll-snap-type: x mandatory`` needs ``snap-x snap-mandatory``).
"""

from __future__ import annotations

__all__ = ["KEYWORD_UTILITIES"]

_BLEND_MODES = (
    "normal multiply screen overlay darken lighten color-dodge color-burn "
    "hard-light soft-light difference exclusion hue saturation color luminosity"
).split()


def _same(prefix: str, values: str) -> dict[str, str]:
    """``{value: f"{prefix}-{value}"}`` for every space separated value."""
    return {value: f"{prefix}-{value}" for value in values.split()}


KEYWORD_UTILITIES: dict[str, dict[str, str]] = {
    "align-content": {
        "normal": "content-normal",
        "center": "content-center",
        "flex-start": "content-start",
        "start": "content-start",
        "flex-end": "content-end",
        "end": "content-end",
        "space-between": "content-between",
        "space-around": "content-around",
        "space-evenly": "content-evenly",
        "baseline": "content-baseline",
        "stretch": "content-stretch",
    },
    "align-items": {
        "flex-start": "items-start",
        "start": "items-start",
        "flex-end": "items-end",
        "end": "items-end",
        "center": "items-center",
        "baseline": "items-baseline",
        "stretch": "items-stretch",
    },
    "align-self": {
        "auto": "self-auto",
        "flex-start": "self-start",
        "start": "self-start",
        "flex-end": "self-end",
        "end": "self-end",
        "center": "self-center",
        "stretch": "self-stretch",
        "baseline": "self-baseline",
    },
    "appearance": {"none": "appearance-none", "auto": "appearance-auto"},
    "background-attachment": _same("bg", "fixed local scroll"),
    "background-blend-mode": {mode: f"bg-blend-{mode}" for mode in _BLEND_MODES},
    "background-clip": {
        "border-box": "bg-clip-border",
        "padding-box": "bg-clip-padding",
        "content-box": "bg-clip-content",
        "text": "bg-clip-text",
    },
    "background-origin": {
        "border-box": "bg-origin-border",
        "padding-box": "bg-origin-padding",
        "content-box": "bg-origin-content",
    },
    "background-repeat": {
        "repeat": "bg-repeat",
        "no-repeat": "bg-no-repeat",
        "repeat-x": "bg-repeat-x",
        "repeat-y": "bg-repeat-y",
        "round": "bg-repeat-round",
        "space": "bg-repeat-space",
    },
    "border-collapse": _same("border", "collapse separate"),
    "border-style": _same("border", "solid dashed dotted double hidden none"),
    "box-decoration-break": _same("box-decoration", "clone slice"),
    "box-sizing": {"border-box": "box-border", "content-box": "box-content"},
    "break-after": _same("break-after", "auto avoid all avoid-page page left right column"),
    "break-before": _same("break-before", "auto avoid all avoid-page page left right column"),
    "break-inside": _same("break-inside", "auto avoid avoid-page avoid-column"),
    "clear": {
        "left": "clear-left",
        "right": "clear-right",
        "both": "clear-both",
        "none": "clear-none",
        "inline-start": "clear-start",
        "inline-end": "clear-end",
    },
    "display": {
        **{
            value: value
            for value in (
                "block inline-block inline flex inline-flex table inline-table "
                "table-caption table-cell table-column table-column-group "
                "table-footer-group table-header-group table-row-group table-row "
                "flow-root grid inline-grid contents list-item"
            ).split()
        },
        "none": "hidden",
    },
    "flex-direction": {
        "row": "flex-row",
        "row-reverse": "flex-row-reverse",
        "column": "flex-col",
        "column-reverse": "flex-col-reverse",
    },
    "flex-wrap": {
        "wrap": "flex-wrap",
        "wrap-reverse": "flex-wrap-reverse",
        "nowrap": "flex-nowrap",
    },
    "float": {
        "right": "float-right",
        "left": "float-left",
        "none": "float-none",
        "inline-start": "float-start",
        "inline-end": "float-end",
    },
    "-webkit-font-smoothing": {
        "antialiased": "antialiased",
        "auto": "subpixel-antialiased",
    },
    "-moz-osx-font-smoothing": {
        "grayscale": "antialiased",
        "auto": "subpixel-antialiased",
    },
    "font-style": {"italic": "italic", "normal": "not-italic"},
    "font-variant-numeric": {
        "normal": "normal-nums",
        **{
            value: value
            for value in (
                "ordinal slashed-zero lining-nums oldstyle-nums proportional-nums "
                "tabular-nums diagonal-fractions stacked-fractions"
            ).split()
        },
    },
    "grid-auto-flow": {
        "row": "grid-flow-row",
        "column": "grid-flow-col",
        "dense": "grid-flow-dense",
        "row dense": "grid-flow-row-dense",
        "column dense": "grid-flow-col-dense",
    },
    "hyphens": _same("hyphens", "none manual auto"),
    "isolation": {"isolate": "isolate", "auto": "isolation-auto"},
    "justify-content": {
        "normal": "justify-normal",
        "flex-start": "justify-start",
        "start": "justify-start",
        "flex-end": "justify-end",
        "end": "justify-end",
        "center": "justify-center",
        "space-between": "justify-between",
        "space-around": "justify-around",
        "space-evenly": "justify-evenly",
        "stretch": "justify-stretch",
    },
    "justify-items": _same("justify-items", "start end center stretch"),
    "justify-self": _same("justify-self", "auto start end center stretch"),
    "list-style-position": _same("list", "inside outside"),
    "mix-blend-mode": {
        **{mode: f"mix-blend-{mode}" for mode in _BLEND_MODES},
        "plus-lighter": "mix-blend-plus-lighter",
    },
    "object-fit": _same("object", "contain cover fill none scale-down"),
    "outline-style": {
        "none": "outline-none",
        "solid": "outline",
        "dashed": "outline-dashed",
        "dotted": "outline-dotted",
        "double": "outline-double",
    },
    "overflow": _same("overflow", "auto hidden clip visible scroll"),
    "overflow-x": _same("overflow-x", "auto hidden clip visible scroll"),
    "overflow-y": _same("overflow-y", "auto hidden clip visible scroll"),
    "overflow-wrap": {"break-word": "break-words", "anywhere": "break-words"},
    "overscroll-behavior": _same("overscroll", "auto contain none"),
    "overscroll-behavior-x": _same("overscroll-x", "auto contain none"),
    "overscroll-behavior-y": _same("overscroll-y", "auto contain none"),
    "page-break-after": {
        "auto": "break-after-auto",
        "always": "break-after-page",
        "avoid": "break-after-avoid-page",
        "left": "break-after-left",
        "right": "break-after-right",
    },
    "page-break-before": {
        "auto": "break-before-auto",
        "always": "break-before-page",
        "avoid": "break-before-avoid-page",
        "left": "break-before-left",
        "right": "break-before-right",
    },
    "page-break-inside": {
        "auto": "break-inside-auto",
        "avoid": "break-inside-avoid-page",
    },
    "place-content": {
        "center": "place-content-center",
        "start": "place-content-start",
        "end": "place-content-end",
        "space-between": "place-content-between",
        "space-around": "place-content-around",
        "space-evenly": "place-content-evenly",
        "baseline": "place-content-baseline",
        "stretch": "place-content-stretch",
    },
    "place-items": _same("place-items", "start end center baseline stretch"),
    "place-self": _same("place-self", "auto start end center stretch"),
    "pointer-events": _same("pointer-events", "none auto"),
    "position": {value: value for value in "static fixed absolute relative sticky".split()},
    "resize": {
        "none": "resize-none",
        "vertical": "resize-y",
        "horizontal": "resize-x",
        "both": "resize",
    },
    "scroll-behavior": _same("scroll", "auto smooth"),
    "scroll-snap-align": {
        "start": "snap-start",
        "end": "snap-end",
        "center": "snap-center",
        "none": "snap-align-none",
    },
    "scroll-snap-stop": {"normal": "snap-normal", "always": "snap-always"},
    "scroll-snap-type": {
        "none": "snap-none",
        "x": "snap-x",
        "y": "snap-y",
        "both": "snap-both",
        "x mandatory": "snap-x snap-mandatory",
        "y mandatory": "snap-y snap-mandatory",
        "both mandatory": "snap-both snap-mandatory",
        "x proximity": "snap-x snap-proximity",
        "y proximity": "snap-y snap-proximity",
        "both proximity": "snap-both snap-proximity",
    },
    "table-layout": _same("table", "auto fixed"),
    "text-align": _same("text", "left center right justify start end"),
    "text-decoration-line": {
        "underline": "underline",
        "overline": "overline",
        "line-through": "line-through",
        "none": "no-underline",
    },
    "text-decoration-style": _same("decoration", "solid double dotted dashed wavy"),
    "text-overflow": {"ellipsis": "text-ellipsis", "clip": "text-clip"},
    "text-transform": {
        "uppercase": "uppercase",
        "lowercase": "lowercase",
        "capitalize": "capitalize",
        "none": "normal-case",
    },
    "text-wrap": _same("text", "wrap nowrap balance pretty"),
    "touch-action": {
        "auto": "touch-auto",
        "none": "touch-none",
        **_same("touch", "pan-x pan-left pan-right pan-y pan-up pan-down pinch-zoom manipulation"),
    },
    "user-select": _same("select", "none text all auto"),
    "vertical-align": _same("align", "baseline top middle bottom text-top text-bottom sub super"),
    "visibility": {"visible": "visible", "hidden": "invisible", "collapse": "collapse"},
    "white-space": _same("whitespace", "normal nowrap pre pre-line pre-wrap break-spaces"),
    "word-break": {"normal": "break-normal", "break-all": "break-all", "keep-all": "break-keep"},
}
