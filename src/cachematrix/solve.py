"""Cached inversion for CacheableMatrix holders."""

from __future__ import annotations

import logging
import time
from typing import Any, Optional, Union

from .config import get_config, peek_config
from .inverters import Inverter, get_inverter, inverter_name
from .matrix import CacheableMatrix
from .observability import SolveRecord

logger = logging.getLogger(__name__)


def _should_record() -> bool:
    # Only an already loaded config is consulted; reading it must not raise.
    if not logger.isEnabledFor(logging.DEBUG):
        return False
    config = peek_config()
    return config is None or config.record_solves


def _log_solve(holder: CacheableMatrix, cache_hit: bool, name: str, started: float) -> None:
    record = SolveRecord(
        holder_id=holder.holder_id,
        cache_hit=cache_hit,
        inverter=name,
        shape=list(holder.shape),
        latency_ms=round((time.perf_counter() - started) * 1000, 3),
    )
    logger.debug("solve %s", record.to_dict())


def _display_name(invert: Optional[Union[str, Inverter]]) -> str:
    if invert is None:
        config = peek_config()
        return config.default_inverter if config is not None else "default"
    if isinstance(invert, str):
        return invert
    return inverter_name(invert)


def cache_solve(
    holder: CacheableMatrix,
    invert: Optional[Union[str, Inverter]] = None,
    *args: Any,
    **kwargs: Any,
) -> Any:
    """
    Return the inverse of ``holder``'s matrix, computing it at most once.

    Args:
        holder: the CacheableMatrix to solve
        invert: callable or registered inverter name; ``None`` uses the
            configured default (``numpy.linalg.inv`` out of the box)
        *args, **kwargs: forwarded to ``invert`` after the matrix

    A cached inverse is returned without touching ``invert`` or the
    configuration. Errors raised by ``invert`` propagate and leave the cache
    empty, so the next call tries again.
    """
    started = time.perf_counter()

    inverse = holder.get_inverse()
    if inverse is not None:
        holder.record_hit()
        if _should_record():
            _log_solve(holder, True, _display_name(invert), started)
        return inverse

    if invert is None:
        invert = get_config().default_inverter
    func = get_inverter(invert)
    holder.record_miss()
    try:
        inverse = func(holder.get_matrix(), *args, **kwargs)
    except Exception as exc:
        logger.warning("Inversion failed for %s: %s", holder.holder_id, exc)
        raise
    holder.set_inverse(inverse)

    if _should_record():
        _log_solve(holder, False, inverter_name(func), started)
    return inverse
