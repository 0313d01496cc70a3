"""Combat log records, MumbleLink parsing, mob ids, translations and a ring buffer."""

__version__ = "0.1.0"

__all__ = [
    "combat",
    "json_ext",
    "mob_ids",
    "mumble",
    "ring_buffer",
    "structs",
    "translations",
]