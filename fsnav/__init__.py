"""Public package surface for fsnav.

Exports the ``Navigator`` facade plus ``main`` for programmatic CLI use.
Most implementation lives in ``fsnav.directory_model`` and
``fsnav.persistence``.
"""

from __future__ import annotations

from .directory_model import Entry, SortMode
from .errors import NavigatorError
from .navigator import Navigator


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["Entry", "Navigator", "NavigatorError", "SortMode", "main"]
