"""Target identifiers and the tag/attribute tables used by each target."""

from typing import Literal

Target = Literal["react-dom", "preact", "react-native-svg", "custom"]

VALID_TARGETS: list[Target] = ["react-dom", "preact", "react-native-svg", "custom"]

# SVG attribute names as React DOM expects them
DOM_ATTRIBUTES = {
    "accent-height": "accentHeight",
    "alignment-baseline": "alignmentBaseline",
    "arabic-form": "arabicForm",
    "baseline-shift": "baselineShift",
    "cap-height": "capHeight",
    "class": "className",
    "clip-path": "clipPath",
    "clip-rule": "clipRule",
    "color-interpolation": "colorInterpolation",
    "color-interpolation-filters": "colorInterpolationFilters",
    "color-profile": "colorProfile",
    "color-rendering": "colorRendering",
    "dominant-baseline": "dominantBaseline",
    "enable-background": "enableBackground",
    "fill-opacity": "fillOpacity",
    "fill-rule": "fillRule",
    "flood-color": "floodColor",
    "flood-opacity": "floodOpacity",
    "font-family": "fontFamily",
    "font-size": "fontSize",
    "font-size-adjust": "fontSizeAdjust",
    "font-stretch": "fontStretch",
    "font-style": "fontStyle",
    "font-variant": "fontVariant",
    "font-weight": "fontWeight",
    "glyph-name": "glyphName",
    "glyph-orientation-horizontal": "glyphOrientationHorizontal",
    "glyph-orientation-vertical": "glyphOrientationVertical",
    "horiz-adv-x": "horizAdvX",
    "horiz-origin-x": "horizOriginX",
    "image-rendering": "imageRendering",
    "letter-spacing": "letterSpacing",
    "lighting-color": "lightingColor",
    "marker-end": "markerEnd",
    "marker-mid": "markerMid",
    "marker-start": "markerStart",
    "overline-position": "overlinePosition",
    "overline-thickness": "overlineThickness",
    "paint-order": "paintOrder",
    "panose-1": "panose1",
    "pointer-events": "pointerEvents",
    "rendering-intent": "renderingIntent",
    "shape-rendering": "shapeRendering",
    "stop-color": "stopColor",
    "stop-opacity": "stopOpacity",
    "strikethrough-position": "strikethroughPosition",
    "strikethrough-thickness": "strikethroughThickness",
    "stroke-dasharray": "strokeDasharray",
    "stroke-dashoffset": "strokeDashoffset",
    "stroke-linecap": "strokeLinecap",
    "stroke-linejoin": "strokeLinejoin",
    "stroke-miterlimit": "strokeMiterlimit",
    "stroke-opacity": "strokeOpacity",
    "stroke-width": "strokeWidth",
    "text-anchor": "textAnchor",
    "text-decoration": "textDecoration",
    "text-rendering": "textRendering",
    "transform-origin": "transformOrigin",
    "underline-position": "underlinePosition",
    "underline-thickness": "underlineThickness",
    "unicode-bidi": "unicodeBidi",
    "unicode-range": "unicodeRange",
    "units-per-em": "unitsPerEm",
    "v-alphabetic": "vAlphabetic",
    "v-hanging": "vHanging",
    "v-ideographic": "vIdeographic",
    "v-mathematical": "vMathematical",
    "vector-effect": "vectorEffect",
    "vert-adv-y": "vertAdvY",
    "vert-origin-x": "vertOriginX",
    "vert-origin-y": "vertOriginY",
    "word-spacing": "wordSpacing",
    "writing-mode": "writingMode",
    "x-height": "xHeight",
    "xlink:actuate": "xlinkActuate",
    "xlink:arcrole": "xlinkArcrole",
    "xlink:href": "xlinkHref",
    "xlink:role": "xlinkRole",
    "xlink:show": "xlinkShow",
    "xlink:title": "xlinkTitle",
    "xlink:type": "xlinkType",
    "xml:base": "xmlBase",
    "xml:lang": "xmlLang",
    "xml:space": "xmlSpace",
    "xmlns:xlink": "xmlnsXlink",
}

# Preact keeps SVG attribute names but cannot express namespaces
PREACT_ATTRIBUTES = {
    "xlink:href": "href",
}

# SVG tags supported by react-native-svg and their component names
NATIVE_TAGS = {
    "svg": "Svg",
    "circle": "Circle",
    "clipPath": "ClipPath",
    "defs": "Defs",
    "ellipse": "Ellipse",
    "feBlend": "FeBlend",
    "feColorMatrix": "FeColorMatrix",
    "feComposite": "FeComposite",
    "feFlood": "FeFlood",
    "feGaussianBlur": "FeGaussianBlur",
    "feMerge": "FeMerge",
    "feMergeNode": "FeMergeNode",
    "feOffset": "FeOffset",
    "filter": "Filter",
    "foreignObject": "ForeignObject",
    "g": "G",
    "image": "Image",
    "line": "Line",
    "linearGradient": "LinearGradient",
    "marker": "Marker",
    "mask": "Mask",
    "path": "Path",
    "pattern": "Pattern",
    "polygon": "Polygon",
    "polyline": "Polyline",
    "radialGradient": "RadialGradient",
    "rect": "Rect",
    "stop": "Stop",
    "symbol": "Symbol",
    "text": "Text",
    "textPath": "TextPath",
    "tspan": "TSpan",
    "use": "Use",
}
