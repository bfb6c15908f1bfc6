MASK32 = 0xFFFFFFFF
MODULUS = 0x100000000

# LCG constants; changing any of them changes every avatar ever drawn.
MULTIPLIER = 1664525
INCREMENT = 1013904223


def _mix32(h: int) -> int:
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & MASK32
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & MASK32
    h ^= h >> 16
    return h


def fold_seed(seed: str) -> int:
    if not isinstance(seed, str):
        raise TypeError(f"seed must be str, got {type(seed).__name__}")
    h = 0
    units = seed.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(units), 2):
        h = (h * 31 + int.from_bytes(units[i:i + 2], "little")) & MASK32
    h = _mix32(h)
    if h & 0x80000000:
        h -= MODULUS
    return abs(h)


class SeededSequence:
    """
    Immutable draw stream over a 32-bit accumulator.
    draw() never mutates; it hands back the value and the advanced sequence.
    """
    __slots__ = ("state",)

    def __init__(self, state: int):
        self.state = int(state) & MASK32

    @classmethod
    def from_seed(cls, seed: str) -> "SeededSequence":
        return cls(fold_seed(seed))

    def draw(self):
        nxt = (self.state * MULTIPLIER + INCREMENT) & MASK32
        return nxt / MODULUS, SeededSequence(nxt)

    def take(self, n: int):
        values, seq = [], self
        for _ in range(n):
            v, seq = seq.draw()
            values.append(v)
        return values, seq

    def __eq__(self, other):
        return isinstance(other, SeededSequence) and other.state == self.state

    def __hash__(self):
        return hash(("SeededSequence", self.state))

    def __repr__(self):
        return f"SeededSequence(state={self.state})"
