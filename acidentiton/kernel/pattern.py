import enum
import math

from acidentiton.log import get_logger
from .palette import ColorHSL, Palette, derive_palette
from .seeded_sequence import SeededSequence

logger = get_logger(__name__)

MIN_SHAPES = 3
MAX_SHAPES = 6
DRAWS_PER_SHAPE = 6


class ShapeKind(enum.Enum):
    # member order is the draw mapping
    CIRCLE = "circle"
    RECT = "rect"
    POLYGON = "polygon"


class ColorRole(enum.Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"

    def pick(self, palette: Palette) -> ColorHSL:
        return getattr(palette, self.value)


_KINDS = list(ShapeKind)
_ROLES = list(ColorRole)


class Shape:
    __slots__ = ("kind", "x", "y", "size", "rotation", "role", "color")

    def __init__(self, kind, x, y, size, rotation, role, color):
        self.kind = kind
        self.x = x
        self.y = y
        self.size = size
        self.rotation = rotation
        self.role = role
        self.color = color

    def as_tuple(self):
        return (self.kind, self.x, self.y, self.size, self.rotation, self.role)

    def __eq__(self, other):
        return isinstance(other, Shape) and other.as_tuple() == self.as_tuple() and other.color == self.color

    def __hash__(self):
        return hash(self.as_tuple())

    def __repr__(self):
        return (f"Shape({self.kind.value}, x={self.x:.3f}, y={self.y:.3f}, size={self.size:.3f}, "
                f"rot={self.rotation:.3f}, {self.role.value})")

    def to_dict(self):
        return {
            "kind": self.kind.value,
            "x": self.x,
            "y": self.y,
            "size": self.size,
            "rotation": self.rotation,
            "role": self.role.value,
            "color": self.color.to_dict(),
        }


class Pattern:
    """
    Palette plus ordered shapes for one seed.
    Shape order is paint order: later shapes overlap earlier ones.
    """
    def __init__(self, seed: str, palette: Palette, shapes):
        self.seed = seed
        self.palette = palette
        self.shapes = tuple(shapes)

    def __eq__(self, other):
        return (isinstance(other, Pattern) and other.palette == self.palette
                and other.shapes == self.shapes)

    def __hash__(self):
        return hash((self.palette, self.shapes))

    def __repr__(self):
        return f"Pattern(seed={self.seed!r}, hue={self.palette.primary.h}, shapes={len(self.shapes)})"

    def to_dict(self):
        return {
            "seed": self.seed,
            "palette": self.palette.to_dict(),
            "shapes": [s.to_dict() for s in self.shapes],
        }


def compose_shapes(seq: SeededSequence, palette: Palette):
    d, seq = seq.draw()
    count = MIN_SHAPES + math.floor(d * (MAX_SHAPES - MIN_SHAPES + 1))
    shapes = []
    for _ in range(count):
        (d_kind, d_x, d_y, d_size, d_rot, d_role), seq = seq.take(DRAWS_PER_SHAPE)
        role = _ROLES[math.floor(d_role * 3)]
        shapes.append(Shape(
            kind=_KINDS[math.floor(d_kind * 3)],
            x=d_x * 100,
            y=d_y * 100,
            size=20 + d_size * 40,
            rotation=d_rot * 360,
            role=role,
            color=role.pick(palette),
        ))
    return shapes, seq


def generate_pattern(seed: str) -> Pattern:
    seq = SeededSequence.from_seed(seed)
    palette, seq = derive_palette(seq)
    shapes, _ = compose_shapes(seq, palette)
    logger.debug("pattern seed=%r hue=%d shapes=%d", seed, palette.primary.h, len(shapes))
    return Pattern(seed, palette, shapes)
