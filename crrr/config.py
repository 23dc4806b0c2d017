"""Session configuration assembled from CLI arguments and the environment.

Nothing is persisted between runs. Numeric values are coerced defensively so
a malformed environment falls back to defaults instead of failing startup.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .browser.selection import DEFAULT_LARGE_JUMP_STEP
from .editor import editor_command
from .exit_file import DEFAULT_OUTPUT_PATH
from .search import DEFAULT_FUZZY_THRESHOLD, MATCH_MODES

OUTPUT_PATH_ENV = "CRRR_OUTPUT_PATH"
KEY_TIMEOUT_MS = 120


@dataclass(frozen=True)
class BrowserConfig:
    """Tunables for one browsing session."""

    start_path: Path | None = None
    show_hidden: bool = False
    match_mode: str = "fuzzy"
    fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD
    large_jump_step: int = DEFAULT_LARGE_JUMP_STEP
    output_path: Path = DEFAULT_OUTPUT_PATH
    editor: tuple[str, ...] = field(default_factory=lambda: tuple(editor_command()))
    key_timeout_ms: int = KEY_TIMEOUT_MS


def coerce_threshold(value: object) -> float:
    """Clamp a similarity threshold into ``[0, 100]``; invalid values use the default."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_FUZZY_THRESHOLD
    return max(0.0, min(100.0, float(value)))


def coerce_jump_step(value: object) -> int:
    """Return a positive jump step; invalid values use the default."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return DEFAULT_LARGE_JUMP_STEP
    return value


def resolve_output_path(explicit: str | None, environ: Mapping[str, str]) -> Path:
    """Pick the exit file: CLI flag, then ``$CRRR_OUTPUT_PATH``, then ``/tmp/crrr``."""
    if explicit:
        return Path(explicit).expanduser()
    from_env = environ.get(OUTPUT_PATH_ENV, "").strip()
    if from_env:
        return Path(from_env).expanduser()
    return DEFAULT_OUTPUT_PATH


def build_config(
    *,
    start_path: str | None = None,
    show_hidden: bool = False,
    match_mode: str = "fuzzy",
    fuzzy_threshold: object = DEFAULT_FUZZY_THRESHOLD,
    large_jump_step: object = DEFAULT_LARGE_JUMP_STEP,
    output_path: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> BrowserConfig:
    env = os.environ if environ is None else environ
    return BrowserConfig(
        start_path=Path(start_path).expanduser() if start_path else None,
        show_hidden=bool(show_hidden),
        match_mode=match_mode if match_mode in MATCH_MODES else "fuzzy",
        fuzzy_threshold=coerce_threshold(fuzzy_threshold),
        large_jump_step=coerce_jump_step(large_jump_step),
        output_path=resolve_output_path(output_path, env),
        editor=tuple(editor_command(dict(env))),
    )
