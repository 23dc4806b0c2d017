"""Input-layer public API for key decoding and command mapping.

Exports are split between low-level terminal decoding (``read_key``) and the
key-token to command table used by the runtime loop.
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key
from .keymap import KeyBinding, KeyMap, default_keymap, is_text_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyBinding",
    "KeyMap",
    "default_keymap",
    "is_text_key",
]
