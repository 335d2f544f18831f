"""Named inversion routines.

``cache_solve`` accepts either a callable or one of the names registered here.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Union

import numpy as np

from .errors import UnknownInverterError

logger = logging.getLogger(__name__)

Inverter = Callable[..., Any]


def solve_identity(a: Any, b: Optional[Any] = None, *args: Any, **kwargs: Any) -> np.ndarray:
    """Solve ``a @ x = b``; with no ``b`` this is the inverse of ``a``."""
    a = np.asarray(a)
    if b is None:
        b = np.eye(a.shape[0], dtype=np.result_type(a, float))
    return np.linalg.solve(a, b, *args, **kwargs)


_REGISTRY: Dict[str, Inverter] = {
    "inv": np.linalg.inv,
    "pinv": np.linalg.pinv,
    "solve": solve_identity,
}


def register_inverter(name: str, func: Inverter) -> None:
    if not callable(func):
        raise TypeError(f"inverter {name!r} must be callable, got {type(func).__name__}")
    if name in _REGISTRY:
        logger.info("Replacing registered inverter %s", name)
    _REGISTRY[name] = func


def unregister_inverter(name: str) -> None:
    try:
        del _REGISTRY[name]
    except KeyError:
        raise UnknownInverterError(name, _REGISTRY) from None


def available_inverters() -> List[str]:
    return sorted(_REGISTRY)


def get_inverter(invert: Union[str, Inverter]) -> Inverter:
    """
    Resolve ``invert`` to a callable.

    Args:
        invert: a callable (returned unchanged) or a registered name

    Raises:
        UnknownInverterError: the name is not registered
        TypeError: ``invert`` is neither a string nor callable
    """
    if isinstance(invert, str):
        try:
            return _REGISTRY[invert]
        except KeyError:
            raise UnknownInverterError(invert, _REGISTRY) from None
    if callable(invert):
        return invert
    raise TypeError(f"invert must be a callable or inverter name, got {type(invert).__name__}")


def inverter_name(invert: Inverter) -> str:
    """Best-effort display name for a resolved inverter."""
    for name, func in _REGISTRY.items():
        if func is invert:
            return name
    return getattr(invert, "__name__", None) or type(invert).__name__
