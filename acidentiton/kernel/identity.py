import time

from .pattern import generate_pattern


def make_seed(username: str, now_ms=None) -> str:
    """Seed minted once at profile creation: '<username>-<epoch ms>'."""
    if not isinstance(username, str):
        raise TypeError(f"username must be str, got {type(username).__name__}")
    if not username.strip():
        raise ValueError("username is empty")
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{username}-{int(now_ms)}"


def profile_colors(seed: str) -> dict:
    pal = generate_pattern(seed).palette
    return {
        "primary": pal.primary.css(),
        "secondary": pal.secondary.css(),
        "background": pal.accent.css(),
    }
