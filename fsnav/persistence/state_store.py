"""Store and restore navigator preferences through a blob store."""

from __future__ import annotations

import logging
import os

from ..directory_model.paths import is_valid_relative, set_relative
from ..directory_model.state import NavigatorState
from ..directory_model.types import SortMode
from ..errors import InvalidArgumentError, NotFoundError, SizeExceededError
from .blob import StateBlob, decode_state_blob, encode_state_blob
from .kv_store import BlobStore

logger = logging.getLogger(__name__)

STATE_NAMESPACE = "fsnav"
STATE_KEY = "state_v1"


def store_state(state: NavigatorState, store: BlobStore) -> None:
    """Persist relative path and sort settings, then commit.

    Errors from encoding or the store propagate.
    """
    data = encode_state_blob(
        StateBlob(
            relative=state.relative,
            sort_mode=int(state.sort_mode),
            ascending=state.ascending,
        )
    )
    with store.open_namespace(STATE_NAMESPACE, writable=True) as namespace:
        namespace.set_blob(STATE_KEY, data)
        namespace.commit()


def load_state(state: NavigatorState, store: BlobStore) -> None:
    """Restore persisted preferences into ``state``.

    Read and decode errors propagate before ``state`` is touched. A decoded
    path is re-validated: an unsafe path resets to root and raises
    ``InvalidArgumentError``; a path that no longer exists on disk resets to
    root and raises ``NotFoundError`` after the sort settings were applied.
    """
    with store.open_namespace(STATE_NAMESPACE, writable=False) as namespace:
        data = namespace.get_blob(STATE_KEY)
    blob = decode_state_blob(data)

    candidate = blob.relative.lstrip("/")
    if not is_valid_relative(candidate):
        set_relative(state, "")
        raise InvalidArgumentError(f"persisted path is not a safe relative path: {blob.relative!r}")
    try:
        set_relative(state, candidate)
    except SizeExceededError:
        logger.warning("Persisted path %r does not fit under root %s; using root", blob.relative, state.root)
        set_relative(state, "")

    try:
        state.sort_mode = SortMode(blob.sort_mode)
    except ValueError:
        logger.warning("Ignoring persisted sort mode %d", blob.sort_mode)
    state.ascending = blob.ascending

    if not os.path.isdir(state.current):
        missing = state.current
        set_relative(state, "")
        raise NotFoundError(f"restored path {missing!r} no longer exists")


__all__ = [
    "STATE_NAMESPACE",
    "STATE_KEY",
    "store_state",
    "load_state",
]
