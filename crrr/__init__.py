"""Public package surface for crrr.

Exports ``main`` for programmatic CLI invocation.
The browser state machine lives in ``crrr.browser``; terminal plumbing in
``crrr.runtime``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["main"]
