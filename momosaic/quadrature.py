"""Gauss-Legendre quadrature rules on the interval [-1, 1]."""

from __future__ import annotations

import math

_SQRT_6_5 = math.sqrt(6.0 / 5.0)
_SQRT_30 = math.sqrt(30.0)

_RULES: dict[int, tuple[tuple[float, ...], tuple[float, ...]]] = {
    1: ((0.0,), (2.0,)),
    2: (
        (-math.sqrt(1.0 / 3.0), math.sqrt(1.0 / 3.0)),
        (1.0, 1.0),
    ),
    3: (
        (-math.sqrt(3.0 / 5.0), 0.0, math.sqrt(3.0 / 5.0)),
        (5.0 / 9.0, 8.0 / 9.0, 5.0 / 9.0),
    ),
    4: (
        (
            -math.sqrt(3.0 / 7.0 + 2.0 / 7.0 * _SQRT_6_5),
            -math.sqrt(3.0 / 7.0 - 2.0 / 7.0 * _SQRT_6_5),
            math.sqrt(3.0 / 7.0 - 2.0 / 7.0 * _SQRT_6_5),
            math.sqrt(3.0 / 7.0 + 2.0 / 7.0 * _SQRT_6_5),
        ),
        (
            (18.0 - _SQRT_30) / 36.0,
            (18.0 + _SQRT_30) / 36.0,
            (18.0 + _SQRT_30) / 36.0,
            (18.0 - _SQRT_30) / 36.0,
        ),
    ),
}

MAX_ORDER = max(_RULES)


def gauss_legendre(order: int) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """Return ``(nodes, weights)`` of the rule with ``order`` points.

    The rule with n points integrates polynomials of degree 2n - 1 exactly.
    """
    try:
        return _RULES[order]
    except KeyError:
        raise ValueError(
            f"quadrature order must be between 1 and {MAX_ORDER}, got {order}"
        ) from None