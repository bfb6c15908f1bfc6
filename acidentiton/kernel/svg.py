import re
from xml.sax.saxutils import quoteattr

from .pattern import Pattern, ShapeKind

SHAPE_OPACITY = 0.8
BACKGROUND_OPACITY = 0.1

# control characters XML 1.0 forbids even when escaped
_XML_FORBIDDEN = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def _attr(value: str) -> str:
    return quoteattr(_XML_FORBIDDEN.sub("", value))


def _num(v) -> str:
    return f"{v:.4f}".rstrip("0").rstrip(".")


def _shape_markup(shape) -> str:
    half = _num(shape.size / 2)
    size = _num(shape.size)
    transform = f"translate({_num(shape.x)}, {_num(shape.y)}) rotate({_num(shape.rotation)} {half} {half})"
    common = f'fill="{shape.color.css()}" opacity="{SHAPE_OPACITY}" transform="{transform}"'
    if shape.kind is ShapeKind.CIRCLE:
        return f'<circle cx="{half}" cy="{half}" r="{half}" {common} />'
    if shape.kind is ShapeKind.RECT:
        return f'<rect x="0" y="0" width="{size}" height="{size}" {common} />'
    points = f"{half},0 {size},{size} 0,{size}"
    return f'<polygon points="{points}" {common} />'


def render_svg(pattern: Pattern, size: int = 64, class_name=None) -> str:
    """
    Paint a pattern as a square SVG on a 0..100 viewBox.
    Shapes are emitted in pattern order so later shapes overlap earlier ones.
    """
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ValueError(f"size must be a positive int, got {size!r}")
    pal = pattern.palette
    cls = f" class={_attr(class_name)}" if class_name else ""
    parts = [
        f'<svg width="{size}" height="{size}" viewBox="0 0 100 100"{cls} xmlns="http://www.w3.org/2000/svg">',
        "<defs>",
        f'<linearGradient id={_attr("grad-" + pattern.seed)} x1="0%" y1="0%" x2="100%" y2="100%">',
        f'<stop offset="0%" stop-color="{pal.primary.css()}" />',
        f'<stop offset="100%" stop-color="{pal.secondary.css()}" />',
        "</linearGradient>",
        "</defs>",
        f'<rect width="100" height="100" fill="{pal.accent.css()}" opacity="{BACKGROUND_OPACITY}" />',
    ]
    parts.extend(_shape_markup(s) for s in pattern.shapes)
    parts.append("</svg>")
    return "\n".join(parts)
