"""The closed set of convertible CSS properties and their converters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

from tailwindify.declarations import composite
from tailwindify.declarations.common import keyword, themed

if TYPE_CHECKING:
    from tailwindify.config import ResolvedConfig

__all__ = ["CONVERTERS", "Converter", "Property", "PropertySpec"]

Converter = Callable[[str, "ResolvedConfig"], "list[str] | None"]


class Property(str, Enum):
    """Every CSS property tailwindify knows how to convert."""

    ACCENT_COLOR = "accent-color"
    ALIGN_CONTENT = "align-content"
    ALIGN_ITEMS = "align-items"
    ALIGN_SELF = "align-self"
    ANIMATION = "animation"
    APPEARANCE = "appearance"
    ASPECT_RATIO = "aspect-ratio"
    BACKDROP_FILTER = "backdrop-filter"
    BACKGROUND = "background"
    BACKGROUND_ATTACHMENT = "background-attachment"
    BACKGROUND_BLEND_MODE = "background-blend-mode"
    BACKGROUND_CLIP = "background-clip"
    BACKGROUND_COLOR = "background-color"
    BACKGROUND_IMAGE = "background-image"
    BACKGROUND_ORIGIN = "background-origin"
    BACKGROUND_POSITION = "background-position"
    BACKGROUND_REPEAT = "background-repeat"
    BACKGROUND_SIZE = "background-size"
    BORDER = "border"
    BORDER_BOTTOM = "border-bottom"
    BORDER_BOTTOM_COLOR = "border-bottom-color"
    BORDER_BOTTOM_LEFT_RADIUS = "border-bottom-left-radius"
    BORDER_BOTTOM_RIGHT_RADIUS = "border-bottom-right-radius"
    BORDER_BOTTOM_WIDTH = "border-bottom-width"
    BORDER_COLLAPSE = "border-collapse"
    BORDER_COLOR = "border-color"
    BORDER_LEFT = "border-left"
    BORDER_LEFT_COLOR = "border-left-color"
    BORDER_LEFT_WIDTH = "border-left-width"
    BORDER_RADIUS = "border-radius"
    BORDER_RIGHT = "border-right"
    BORDER_RIGHT_COLOR = "border-right-color"
    BORDER_RIGHT_WIDTH = "border-right-width"
    BORDER_SPACING = "border-spacing"
    BORDER_STYLE = "border-style"
    BORDER_TOP = "border-top"
    BORDER_TOP_COLOR = "border-top-color"
    BORDER_TOP_LEFT_RADIUS = "border-top-left-radius"
    BORDER_TOP_RIGHT_RADIUS = "border-top-right-radius"
    BORDER_TOP_WIDTH = "border-top-width"
    BORDER_WIDTH = "border-width"
    BOTTOM = "bottom"
    BOX_DECORATION_BREAK = "box-decoration-break"
    BOX_SHADOW = "box-shadow"
    BOX_SIZING = "box-sizing"
    BREAK_AFTER = "break-after"
    BREAK_BEFORE = "break-before"
    BREAK_INSIDE = "break-inside"
    CARET_COLOR = "caret-color"
    CLEAR = "clear"
    COLOR = "color"
    COLUMN_GAP = "column-gap"
    COLUMNS = "columns"
    CONTENT = "content"
    CURSOR = "cursor"
    DISPLAY = "display"
    FILL = "fill"
    FILTER = "filter"
    FLEX = "flex"
    FLEX_BASIS = "flex-basis"
    FLEX_DIRECTION = "flex-direction"
    FLEX_FLOW = "flex-flow"
    FLEX_GROW = "flex-grow"
    FLEX_SHRINK = "flex-shrink"
    FLEX_WRAP = "flex-wrap"
    FLOAT = "float"
    FONT_SIZE = "font-size"
    FONT_STYLE = "font-style"
    FONT_VARIANT_NUMERIC = "font-variant-numeric"
    FONT_WEIGHT = "font-weight"
    GAP = "gap"
    GRID_AUTO_COLUMNS = "grid-auto-columns"
    GRID_AUTO_FLOW = "grid-auto-flow"
    GRID_AUTO_ROWS = "grid-auto-rows"
    GRID_COLUMN = "grid-column"
    GRID_COLUMN_END = "grid-column-end"
    GRID_COLUMN_GAP = "grid-column-gap"
    GRID_COLUMN_START = "grid-column-start"
    GRID_GAP = "grid-gap"
    GRID_ROW = "grid-row"
    GRID_ROW_END = "grid-row-end"
    GRID_ROW_GAP = "grid-row-gap"
    GRID_ROW_START = "grid-row-start"
    GRID_TEMPLATE_COLUMNS = "grid-template-columns"
    GRID_TEMPLATE_ROWS = "grid-template-rows"
    HEIGHT = "height"
    HYPHENS = "hyphens"
    INSET = "inset"
    ISOLATION = "isolation"
    JUSTIFY_CONTENT = "justify-content"
    JUSTIFY_ITEMS = "justify-items"
    JUSTIFY_SELF = "justify-self"
    LEFT = "left"
    LETTER_SPACING = "letter-spacing"
    LINE_HEIGHT = "line-height"
    LIST_STYLE_POSITION = "list-style-position"
    LIST_STYLE_TYPE = "list-style-type"
    MARGIN = "margin"
    MARGIN_BOTTOM = "margin-bottom"
    MARGIN_LEFT = "margin-left"
    MARGIN_RIGHT = "margin-right"
    MARGIN_TOP = "margin-top"
    MAX_HEIGHT = "max-height"
    MAX_WIDTH = "max-width"
    MIN_HEIGHT = "min-height"
    MIN_WIDTH = "min-width"
    MIX_BLEND_MODE = "mix-blend-mode"
    MOZ_OSX_FONT_SMOOTHING = "-moz-osx-font-smoothing"
    OBJECT_FIT = "object-fit"
    OBJECT_POSITION = "object-position"
    OPACITY = "opacity"
    ORDER = "order"
    OUTLINE = "outline"
    OUTLINE_COLOR = "outline-color"
    OUTLINE_OFFSET = "outline-offset"
    OUTLINE_STYLE = "outline-style"
    OUTLINE_WIDTH = "outline-width"
    OVERFLOW = "overflow"
    OVERFLOW_WRAP = "overflow-wrap"
    OVERFLOW_X = "overflow-x"
    OVERFLOW_Y = "overflow-y"
    OVERSCROLL_BEHAVIOR = "overscroll-behavior"
    OVERSCROLL_BEHAVIOR_X = "overscroll-behavior-x"
    OVERSCROLL_BEHAVIOR_Y = "overscroll-behavior-y"
    PADDING = "padding"
    PADDING_BOTTOM = "padding-bottom"
    PADDING_LEFT = "padding-left"
    PADDING_RIGHT = "padding-right"
    PADDING_TOP = "padding-top"
    PAGE_BREAK_AFTER = "page-break-after"
    PAGE_BREAK_BEFORE = "page-break-before"
    PAGE_BREAK_INSIDE = "page-break-inside"
    PLACE_CONTENT = "place-content"
    PLACE_ITEMS = "place-items"
    PLACE_SELF = "place-self"
    POINTER_EVENTS = "pointer-events"
    POSITION = "position"
    RESIZE = "resize"
    RIGHT = "right"
    ROW_GAP = "row-gap"
    SCROLL_BEHAVIOR = "scroll-behavior"
    SCROLL_MARGIN = "scroll-margin"
    SCROLL_MARGIN_BOTTOM = "scroll-margin-bottom"
    SCROLL_MARGIN_LEFT = "scroll-margin-left"
    SCROLL_MARGIN_RIGHT = "scroll-margin-right"
    SCROLL_MARGIN_TOP = "scroll-margin-top"
    SCROLL_PADDING = "scroll-padding"
    SCROLL_PADDING_BOTTOM = "scroll-padding-bottom"
    SCROLL_PADDING_LEFT = "scroll-padding-left"
    SCROLL_PADDING_RIGHT = "scroll-padding-right"
    SCROLL_PADDING_TOP = "scroll-padding-top"
    SCROLL_SNAP_ALIGN = "scroll-snap-align"
    SCROLL_SNAP_STOP = "scroll-snap-stop"
    SCROLL_SNAP_TYPE = "scroll-snap-type"
    STROKE = "stroke"
    STROKE_WIDTH = "stroke-width"
    TABLE_LAYOUT = "table-layout"
    TEXT_ALIGN = "text-align"
    TEXT_DECORATION = "text-decoration"
    TEXT_DECORATION_COLOR = "text-decoration-color"
    TEXT_DECORATION_LINE = "text-decoration-line"
    TEXT_DECORATION_STYLE = "text-decoration-style"
    TEXT_DECORATION_THICKNESS = "text-decoration-thickness"
    TEXT_INDENT = "text-indent"
    TEXT_OVERFLOW = "text-overflow"
    TEXT_TRANSFORM = "text-transform"
    TEXT_UNDERLINE_OFFSET = "text-underline-offset"
    TEXT_WRAP = "text-wrap"
    TOP = "top"
    TOUCH_ACTION = "touch-action"
    TRANSFORM = "transform"
    TRANSFORM_ORIGIN = "transform-origin"
    TRANSITION = "transition"
    TRANSITION_DELAY = "transition-delay"
    TRANSITION_DURATION = "transition-duration"
    TRANSITION_PROPERTY = "transition-property"
    TRANSITION_TIMING_FUNCTION = "transition-timing-function"
    USER_SELECT = "user-select"
    VERTICAL_ALIGN = "vertical-align"
    VISIBILITY = "visibility"
    WEBKIT_FONT_SMOOTHING = "-webkit-font-smoothing"
    WHITE_SPACE = "white-space"
    WIDTH = "width"
    WILL_CHANGE = "will-change"
    WORD_BREAK = "word-break"
    Z_INDEX = "z-index"


@dataclass(frozen=True)
class PropertySpec:
    """Core plugins a property belongs to and the function converting it.

    The property is disabled when any of its plugins is disabled.
    """

    plugins: tuple[str, ...]
    convert: Converter


def _keyword(prop: Property, plugin: str) -> PropertySpec:
    return PropertySpec((plugin,), lambda value, config: keyword(prop.value, value))


def _themed(
    category: str,
    prefix: str,
    *,
    plugin: str | None = None,
    hint: str | None = None,
    negative: bool = False,
) -> PropertySpec:
    return PropertySpec(
        (plugin or category,),
        lambda value, config: themed(
            value, config, category, prefix, hint=hint, negative=negative
        ),
    )


def _box(
    category: str,
    prefixes: tuple[str, str, str, str],
    *,
    negative: bool = False,
) -> PropertySpec:
    return PropertySpec(
        (category,),
        lambda value, config: composite.box(
            value, config, category, prefixes, negative=negative
        ),
    )


def _border(prefix: str) -> PropertySpec:
    return PropertySpec(
        ("borderWidth", "borderStyle", "borderColor"),
        lambda value, config: composite.border(value, config, prefix),
    )


_BORDER_SIDES = ("border-t", "border-r", "border-b", "border-l")
_CORNERS = ("rounded-tl", "rounded-tr", "rounded-br", "rounded-bl")
_TRANSITION_PLUGINS = (
    "transitionProperty",
    "transitionDuration",
    "transitionTimingFunction",
    "transitionDelay",
)


CONVERTERS: dict[Property, PropertySpec] = {
    Property.ACCENT_COLOR: _themed("accentColor", "accent", hint="color"),
    Property.ALIGN_CONTENT: _keyword(Property.ALIGN_CONTENT, "alignContent"),
    Property.ALIGN_ITEMS: _keyword(Property.ALIGN_ITEMS, "alignItems"),
    Property.ALIGN_SELF: _keyword(Property.ALIGN_SELF, "alignSelf"),
    Property.ANIMATION: _themed("animation", "animate"),
    Property.APPEARANCE: _keyword(Property.APPEARANCE, "appearance"),
    Property.ASPECT_RATIO: _themed("aspectRatio", "aspect"),
    Property.BACKDROP_FILTER: PropertySpec(
        ("backdropFilter",),
        lambda value, config: composite.filters(
            value, config, composite.BACKDROP_FILTER_FUNCTIONS, "backdrop-filter-none"
        ),
    ),
    Property.BACKGROUND: PropertySpec(("backgroundColor",), composite.background),
    Property.BACKGROUND_ATTACHMENT: _keyword(
        Property.BACKGROUND_ATTACHMENT, "backgroundAttachment"
    ),
    Property.BACKGROUND_BLEND_MODE: _keyword(
        Property.BACKGROUND_BLEND_MODE, "backgroundBlendMode"
    ),
    Property.BACKGROUND_CLIP: _keyword(Property.BACKGROUND_CLIP, "backgroundClip"),
    Property.BACKGROUND_COLOR: _themed("backgroundColor", "bg", hint="color"),
    Property.BACKGROUND_IMAGE: _themed("backgroundImage", "bg", hint="image"),
    Property.BACKGROUND_ORIGIN: _keyword(Property.BACKGROUND_ORIGIN, "backgroundOrigin"),
    Property.BACKGROUND_POSITION: _themed("backgroundPosition", "bg", hint="position"),
    Property.BACKGROUND_REPEAT: _keyword(Property.BACKGROUND_REPEAT, "backgroundRepeat"),
    Property.BACKGROUND_SIZE: _themed("backgroundSize", "bg", hint="length"),
    Property.BORDER: _border("border"),
    Property.BORDER_BOTTOM: _border("border-b"),
    Property.BORDER_BOTTOM_COLOR: _themed("borderColor", "border-b", hint="color"),
    Property.BORDER_BOTTOM_LEFT_RADIUS: _themed("borderRadius", "rounded-bl", hint="length"),
    Property.BORDER_BOTTOM_RIGHT_RADIUS: _themed("borderRadius", "rounded-br", hint="length"),
    Property.BORDER_BOTTOM_WIDTH: _themed("borderWidth", "border-b", hint="length"),
    Property.BORDER_COLLAPSE: _keyword(Property.BORDER_COLLAPSE, "borderCollapse"),
    Property.BORDER_COLOR: PropertySpec(
        ("borderColor",),
        lambda value, config: composite.single_or_box(
            value, config, "borderColor", "border", _BORDER_SIDES, hint="color"
        ),
    ),
    Property.BORDER_LEFT: _border("border-l"),
    Property.BORDER_LEFT_COLOR: _themed("borderColor", "border-l", hint="color"),
    Property.BORDER_LEFT_WIDTH: _themed("borderWidth", "border-l", hint="length"),
    Property.BORDER_RADIUS: PropertySpec(
        ("borderRadius",),
        lambda value, config: composite.single_or_box(
            value, config, "borderRadius", "rounded", _CORNERS, hint="length"
        ),
    ),
    Property.BORDER_RIGHT: _border("border-r"),
    Property.BORDER_RIGHT_COLOR: _themed("borderColor", "border-r", hint="color"),
    Property.BORDER_RIGHT_WIDTH: _themed("borderWidth", "border-r", hint="length"),
    Property.BORDER_SPACING: _themed("borderSpacing", "border-spacing", hint="length"),
    Property.BORDER_STYLE: _keyword(Property.BORDER_STYLE, "borderStyle"),
    Property.BORDER_TOP: _border("border-t"),
    Property.BORDER_TOP_COLOR: _themed("borderColor", "border-t", hint="color"),
    Property.BORDER_TOP_LEFT_RADIUS: _themed("borderRadius", "rounded-tl", hint="length"),
    Property.BORDER_TOP_RIGHT_RADIUS: _themed("borderRadius", "rounded-tr", hint="length"),
    Property.BORDER_TOP_WIDTH: _themed("borderWidth", "border-t", hint="length"),
    Property.BORDER_WIDTH: PropertySpec(
        ("borderWidth",),
        lambda value, config: composite.single_or_box(
            value, config, "borderWidth", "border", _BORDER_SIDES, hint="length"
        ),
    ),
    Property.BOTTOM: _themed("inset", "bottom", hint="length", negative=True),
    Property.BOX_DECORATION_BREAK: _keyword(
        Property.BOX_DECORATION_BREAK, "boxDecorationBreak"
    ),
    Property.BOX_SHADOW: _themed("boxShadow", "shadow"),
    Property.BOX_SIZING: _keyword(Property.BOX_SIZING, "boxSizing"),
    Property.BREAK_AFTER: _keyword(Property.BREAK_AFTER, "breakAfter"),
    Property.BREAK_BEFORE: _keyword(Property.BREAK_BEFORE, "breakBefore"),
    Property.BREAK_INSIDE: _keyword(Property.BREAK_INSIDE, "breakInside"),
    Property.CARET_COLOR: _themed("caretColor", "caret", hint="color"),
    Property.CLEAR: _keyword(Property.CLEAR, "clear"),
    Property.COLOR: _themed("textColor", "text", hint="color"),
    Property.COLUMN_GAP: _themed("gap", "gap-x", hint="length"),
    Property.COLUMNS: _themed("columns", "columns"),
    Property.CONTENT: _themed("content", "content"),
    Property.CURSOR: _themed("cursor", "cursor"),
    Property.DISPLAY: _keyword(Property.DISPLAY, "display"),
    Property.FILL: _themed("fill", "fill", hint="color"),
    Property.FILTER: PropertySpec(
        ("filter",),
        lambda value, config: composite.filters(
            value, config, composite.FILTER_FUNCTIONS, "filter-none"
        ),
    ),
    Property.FLEX: _themed("flex", "flex"),
    Property.FLEX_BASIS: _themed("flexBasis", "basis", hint="length"),
    Property.FLEX_DIRECTION: _keyword(Property.FLEX_DIRECTION, "flexDirection"),
    Property.FLEX_FLOW: PropertySpec(("flexDirection", "flexWrap"), composite.flex_flow),
    Property.FLEX_GROW: _themed("flexGrow", "grow", hint="number"),
    Property.FLEX_SHRINK: _themed("flexShrink", "shrink", hint="number"),
    Property.FLEX_WRAP: _keyword(Property.FLEX_WRAP, "flexWrap"),
    Property.FLOAT: _keyword(Property.FLOAT, "float"),
    Property.FONT_SIZE: _themed("fontSize", "text", hint="length"),
    Property.FONT_STYLE: _keyword(Property.FONT_STYLE, "fontStyle"),
    Property.FONT_VARIANT_NUMERIC: _keyword(
        Property.FONT_VARIANT_NUMERIC, "fontVariantNumeric"
    ),
    Property.FONT_WEIGHT: _themed("fontWeight", "font", hint="number"),
    Property.GAP: PropertySpec(("gap",), composite.gap),
    Property.GRID_AUTO_COLUMNS: _themed("gridAutoColumns", "auto-cols"),
    Property.GRID_AUTO_FLOW: _keyword(Property.GRID_AUTO_FLOW, "gridAutoFlow"),
    Property.GRID_AUTO_ROWS: _themed("gridAutoRows", "auto-rows"),
    Property.GRID_COLUMN: _themed("gridColumn", "col"),
    Property.GRID_COLUMN_END: _themed("gridColumnEnd", "col-end"),
    Property.GRID_COLUMN_GAP: _themed("gap", "gap-x", hint="length"),
    Property.GRID_COLUMN_START: _themed("gridColumnStart", "col-start"),
    Property.GRID_GAP: PropertySpec(("gap",), composite.gap),
    Property.GRID_ROW: _themed("gridRow", "row"),
    Property.GRID_ROW_END: _themed("gridRowEnd", "row-end"),
    Property.GRID_ROW_GAP: _themed("gap", "gap-y", hint="length"),
    Property.GRID_ROW_START: _themed("gridRowStart", "row-start"),
    Property.GRID_TEMPLATE_COLUMNS: _themed("gridTemplateColumns", "grid-cols"),
    Property.GRID_TEMPLATE_ROWS: _themed("gridTemplateRows", "grid-rows"),
    Property.HEIGHT: _themed("height", "h", hint="length"),
    Property.HYPHENS: _keyword(Property.HYPHENS, "hyphens"),
    Property.INSET: _box("inset", ("top", "right", "bottom", "left"), negative=True),
    Property.ISOLATION: _keyword(Property.ISOLATION, "isolation"),
    Property.JUSTIFY_CONTENT: _keyword(Property.JUSTIFY_CONTENT, "justifyContent"),
    Property.JUSTIFY_ITEMS: _keyword(Property.JUSTIFY_ITEMS, "justifyItems"),
    Property.JUSTIFY_SELF: _keyword(Property.JUSTIFY_SELF, "justifySelf"),
    Property.LEFT: _themed("inset", "left", hint="length", negative=True),
    Property.LETTER_SPACING: _themed("letterSpacing", "tracking", negative=True),
    Property.LINE_HEIGHT: _themed("lineHeight", "leading"),
    Property.LIST_STYLE_POSITION: _keyword(
        Property.LIST_STYLE_POSITION, "listStylePosition"
    ),
    Property.LIST_STYLE_TYPE: _themed("listStyleType", "list"),
    Property.MARGIN: _box("margin", ("mt", "mr", "mb", "ml"), negative=True),
    Property.MARGIN_BOTTOM: _themed("margin", "mb", hint="length", negative=True),
    Property.MARGIN_LEFT: _themed("margin", "ml", hint="length", negative=True),
    Property.MARGIN_RIGHT: _themed("margin", "mr", hint="length", negative=True),
    Property.MARGIN_TOP: _themed("margin", "mt", hint="length", negative=True),
    Property.MAX_HEIGHT: _themed("maxHeight", "max-h", hint="length"),
    Property.MAX_WIDTH: _themed("maxWidth", "max-w", hint="length"),
    Property.MIN_HEIGHT: _themed("minHeight", "min-h", hint="length"),
    Property.MIN_WIDTH: _themed("minWidth", "min-w", hint="length"),
    Property.MIX_BLEND_MODE: _keyword(Property.MIX_BLEND_MODE, "mixBlendMode"),
    Property.MOZ_OSX_FONT_SMOOTHING: _keyword(
        Property.MOZ_OSX_FONT_SMOOTHING, "fontSmoothing"
    ),
    Property.OBJECT_FIT: _keyword(Property.OBJECT_FIT, "objectFit"),
    Property.OBJECT_POSITION: _themed("objectPosition", "object", hint="position"),
    Property.OPACITY: _themed("opacity", "opacity", hint="number"),
    Property.ORDER: _themed("order", "order", hint="number", negative=True),
    Property.OUTLINE: PropertySpec(
        ("outlineWidth", "outlineStyle", "outlineColor"), composite.outline
    ),
    Property.OUTLINE_COLOR: _themed("outlineColor", "outline", hint="color"),
    Property.OUTLINE_OFFSET: _themed(
        "outlineOffset", "outline-offset", hint="length", negative=True
    ),
    Property.OUTLINE_STYLE: _keyword(Property.OUTLINE_STYLE, "outlineStyle"),
    Property.OUTLINE_WIDTH: _themed("outlineWidth", "outline", hint="length"),
    Property.OVERFLOW: _keyword(Property.OVERFLOW, "overflow"),
    Property.OVERFLOW_WRAP: _keyword(Property.OVERFLOW_WRAP, "wordBreak"),
    Property.OVERFLOW_X: _keyword(Property.OVERFLOW_X, "overflow"),
    Property.OVERFLOW_Y: _keyword(Property.OVERFLOW_Y, "overflow"),
    Property.OVERSCROLL_BEHAVIOR: _keyword(
        Property.OVERSCROLL_BEHAVIOR, "overscrollBehavior"
    ),
    Property.OVERSCROLL_BEHAVIOR_X: _keyword(
        Property.OVERSCROLL_BEHAVIOR_X, "overscrollBehavior"
    ),
    Property.OVERSCROLL_BEHAVIOR_Y: _keyword(
        Property.OVERSCROLL_BEHAVIOR_Y, "overscrollBehavior"
    ),
    Property.PADDING: _box("padding", ("pt", "pr", "pb", "pl")),
    Property.PADDING_BOTTOM: _themed("padding", "pb", hint="length"),
    Property.PADDING_LEFT: _themed("padding", "pl", hint="length"),
    Property.PADDING_RIGHT: _themed("padding", "pr", hint="length"),
    Property.PADDING_TOP: _themed("padding", "pt", hint="length"),
    Property.PAGE_BREAK_AFTER: _keyword(Property.PAGE_BREAK_AFTER, "breakAfter"),
    Property.PAGE_BREAK_BEFORE: _keyword(Property.PAGE_BREAK_BEFORE, "breakBefore"),
    Property.PAGE_BREAK_INSIDE: _keyword(Property.PAGE_BREAK_INSIDE, "breakInside"),
    Property.PLACE_CONTENT: _keyword(Property.PLACE_CONTENT, "placeContent"),
    Property.PLACE_ITEMS: _keyword(Property.PLACE_ITEMS, "placeItems"),
    Property.PLACE_SELF: _keyword(Property.PLACE_SELF, "placeSelf"),
    Property.POINTER_EVENTS: _keyword(Property.POINTER_EVENTS, "pointerEvents"),
    Property.POSITION: _keyword(Property.POSITION, "position"),
    Property.RESIZE: _keyword(Property.RESIZE, "resize"),
    Property.RIGHT: _themed("inset", "right", hint="length", negative=True),
    Property.ROW_GAP: _themed("gap", "gap-y", hint="length"),
    Property.SCROLL_BEHAVIOR: _keyword(Property.SCROLL_BEHAVIOR, "scrollBehavior"),
    Property.SCROLL_MARGIN: _box(
        "scrollMargin",
        ("scroll-mt", "scroll-mr", "scroll-mb", "scroll-ml"),
        negative=True,
    ),
    Property.SCROLL_MARGIN_BOTTOM: _themed(
        "scrollMargin", "scroll-mb", hint="length", negative=True
    ),
    Property.SCROLL_MARGIN_LEFT: _themed(
        "scrollMargin", "scroll-ml", hint="length", negative=True
    ),
    Property.SCROLL_MARGIN_RIGHT: _themed(
        "scrollMargin", "scroll-mr", hint="length", negative=True
    ),
    Property.SCROLL_MARGIN_TOP: _themed(
        "scrollMargin", "scroll-mt", hint="length", negative=True
    ),
    Property.SCROLL_PADDING: _box(
        "scrollPadding", ("scroll-pt", "scroll-pr", "scroll-pb", "scroll-pl")
    ),
    Property.SCROLL_PADDING_BOTTOM: _themed("scrollPadding", "scroll-pb", hint="length"),
    Property.SCROLL_PADDING_LEFT: _themed("scrollPadding", "scroll-pl", hint="length"),
    Property.SCROLL_PADDING_RIGHT: _themed("scrollPadding", "scroll-pr", hint="length"),
    Property.SCROLL_PADDING_TOP: _themed("scrollPadding", "scroll-pt", hint="length"),
    Property.SCROLL_SNAP_ALIGN: _keyword(Property.SCROLL_SNAP_ALIGN, "scrollSnapAlign"),
    Property.SCROLL_SNAP_STOP: _keyword(Property.SCROLL_SNAP_STOP, "scrollSnapStop"),
    Property.SCROLL_SNAP_TYPE: _keyword(Property.SCROLL_SNAP_TYPE, "scrollSnapType"),
    Property.STROKE: _themed("stroke", "stroke", hint="color"),
    Property.STROKE_WIDTH: _themed("strokeWidth", "stroke", hint="number"),
    Property.TABLE_LAYOUT: _keyword(Property.TABLE_LAYOUT, "tableLayout"),
    Property.TEXT_ALIGN: _keyword(Property.TEXT_ALIGN, "textAlign"),
    Property.TEXT_DECORATION: PropertySpec(
        (
            "textDecoration",
            "textDecorationStyle",
            "textDecorationThickness",
            "textDecorationColor",
        ),
        composite.text_decoration,
    ),
    Property.TEXT_DECORATION_COLOR: _themed(
        "textDecorationColor", "decoration", hint="color"
    ),
    Property.TEXT_DECORATION_LINE: _keyword(
        Property.TEXT_DECORATION_LINE, "textDecoration"
    ),
    Property.TEXT_DECORATION_STYLE: _keyword(
        Property.TEXT_DECORATION_STYLE, "textDecorationStyle"
    ),
    Property.TEXT_DECORATION_THICKNESS: _themed(
        "textDecorationThickness", "decoration", hint="length"
    ),
    Property.TEXT_INDENT: _themed("textIndent", "indent", hint="length", negative=True),
    Property.TEXT_OVERFLOW: _keyword(Property.TEXT_OVERFLOW, "textOverflow"),
    Property.TEXT_TRANSFORM: _keyword(Property.TEXT_TRANSFORM, "textTransform"),
    Property.TEXT_UNDERLINE_OFFSET: _themed(
        "textUnderlineOffset", "underline-offset", hint="length"
    ),
    Property.TEXT_WRAP: _keyword(Property.TEXT_WRAP, "textWrap"),
    Property.TOP: _themed("inset", "top", hint="length", negative=True),
    Property.TOUCH_ACTION: _keyword(Property.TOUCH_ACTION, "touchAction"),
    Property.TRANSFORM: PropertySpec(("transform",), composite.transform),
    Property.TRANSFORM_ORIGIN: _themed("transformOrigin", "origin"),
    Property.TRANSITION: PropertySpec(_TRANSITION_PLUGINS, composite.transition),
    Property.TRANSITION_DELAY: _themed("transitionDelay", "delay"),
    Property.TRANSITION_DURATION: _themed("transitionDuration", "duration"),
    Property.TRANSITION_PROPERTY: _themed("transitionProperty", "transition"),
    Property.TRANSITION_TIMING_FUNCTION: _themed("transitionTimingFunction", "ease"),
    Property.USER_SELECT: _keyword(Property.USER_SELECT, "userSelect"),
    Property.VERTICAL_ALIGN: _keyword(Property.VERTICAL_ALIGN, "verticalAlign"),
    Property.VISIBILITY: _keyword(Property.VISIBILITY, "visibility"),
    Property.WEBKIT_FONT_SMOOTHING: _keyword(
        Property.WEBKIT_FONT_SMOOTHING, "fontSmoothing"
    ),
    Property.WHITE_SPACE: _keyword(Property.WHITE_SPACE, "whitespace"),
    Property.WIDTH: _themed("width", "w", hint="length"),
    Property.WILL_CHANGE: _themed("willChange", "will-change"),
    Property.WORD_BREAK: _keyword(Property.WORD_BREAK, "wordBreak"),
    Property.Z_INDEX: _themed("zIndex", "z", hint="number", negative=True),
}
