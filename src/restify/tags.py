"""
Recognised element vocabulary for tag-name lookups.

Custom elements (``<my-widget>``) and misspelt tags are not part of the
vocabulary, so a lookup for them matches nothing.
"""

from __future__ import annotations

from typing import Optional

KNOWN_TAGS: frozenset[str] = frozenset(
    {
        # Document metadata and sectioning
        "html", "head", "title", "base", "link", "meta", "style", "body",
        "article", "section", "nav", "aside", "h1", "h2", "h3", "h4", "h5", "h6",
        "hgroup", "header", "footer", "address", "main", "search",
        # Grouping content
        "p", "hr", "pre", "blockquote", "ol", "ul", "menu", "li", "dl", "dt", "dd",
        "figure", "figcaption", "div",
        # Text-level semantics
        "a", "em", "strong", "small", "s", "cite", "q", "dfn", "abbr", "ruby", "rt",
        "rp", "rb", "rtc", "data", "time", "code", "var", "samp", "kbd", "sub", "sup",
        "i", "b", "u", "mark", "bdi", "bdo", "span", "br", "wbr",
        # Edits
        "ins", "del",
        # Embedded content
        "picture", "source", "img", "iframe", "embed", "object", "param", "video",
        "audio", "track", "map", "area", "svg", "math",
        # Tabular data
        "table", "caption", "colgroup", "col", "tbody", "thead", "tfoot", "tr", "td", "th",
        # Forms
        "form", "label", "input", "button", "select", "datalist", "optgroup", "option",
        "textarea", "output", "progress", "meter", "fieldset", "legend", "selectedcontent",
        # Interactive and scripting
        "details", "summary", "dialog", "script", "noscript", "template", "slot", "canvas",
        # Obsolete but still recognised by parsers
        "acronym", "applet", "basefont", "bgsound", "big", "blink", "center", "dir",
        "font", "frame", "frameset", "image", "isindex", "keygen", "listing", "marquee",
        "menuitem", "nobr", "noembed", "noframes", "plaintext", "strike", "tt", "xmp",
        # Foreign content commonly found inline
        "circle", "clippath", "defs", "desc", "ellipse", "foreignobject", "g", "line",
        "lineargradient", "mask", "path", "pattern", "polygon", "polyline",
        "radialgradient", "rect", "stop", "symbol", "text", "tspan", "use",
        "mi", "mn", "mo", "ms", "mtext", "annotation-xml", "malignmark", "mglyph",
    }
)


def lookup_tag(name: str) -> Optional[str]:
    """Return the normalised (lower-case) tag name, or None if it is not recognised."""
    normalised = name.lower()
    if normalised in KNOWN_TAGS:
        return normalised
    return None
