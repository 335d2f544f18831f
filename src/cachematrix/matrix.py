#!/usr/bin/env python3
"""
Cacheable Matrix
Holds one matrix and, once computed, its inverse.

Implements:
- set_matrix(m) → replaces the matrix, drops the cached inverse
- get_matrix() → matrix
- set_inverse(inv)
- get_inverse() → inverse | None
- get_stats() → {hits, misses, resets, hit_rate_percent}
"""

import logging
from typing import Any, Dict, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


class CacheableMatrix:
    """
    A matrix paired with a single cache slot for its inverse.

    The slot is only valid for the matrix it was computed from, so
    set_matrix() empties it. Nothing here checks that the matrix is square
    or invertible; the inverter used by cache_solve() decides that.
    """

    def __init__(self, matrix: Any = None):
        if matrix is None:
            matrix = np.empty((0, 0))
        self._matrix = matrix
        self._inverse: Optional[Any] = None

        self.stats = {
            "hits": 0,
            "misses": 0,
            "resets": 0,
        }

    def set_matrix(self, matrix: Any) -> None:
        """Replace the matrix and clear the cached inverse."""
        self._matrix = matrix
        self._inverse = None
        self.stats["resets"] += 1
        logger.debug("Matrix replaced on %s, inverse cleared", self.holder_id)

    def get_matrix(self) -> Any:
        return self._matrix

    def set_inverse(self, inverse: Any) -> None:
        self._inverse = inverse

    def get_inverse(self) -> Optional[Any]:
        return self._inverse

    def has_inverse(self) -> bool:
        return self._inverse is not None

    @property
    def shape(self) -> Tuple[int, ...]:
        return tuple(np.shape(self._matrix))

    @property
    def holder_id(self) -> str:
        return f"{type(self).__name__}@{id(self):x}"

    def record_hit(self) -> None:
        self.stats["hits"] += 1

    def record_miss(self) -> None:
        self.stats["misses"] += 1

    def get_stats(self) -> Dict[str, Any]:
        total = self.stats["hits"] + self.stats["misses"]
        hit_rate = (self.stats["hits"] / total * 100) if total > 0 else 0

        return {
            "hits": self.stats["hits"],
            "misses": self.stats["misses"],
            "resets": self.stats["resets"],
            "total_requests": total,
            "hit_rate_percent": round(hit_rate, 1),
        }

    def __repr__(self) -> str:
        state = "cached" if self.has_inverse() else "empty"
        return f"CacheableMatrix(shape={self.shape}, inverse={state})"
