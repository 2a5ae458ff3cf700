"""
Configuration for space3 numerics.

Holds the shared comparison tolerance and the trigonometric functions used by
the rotation generators.

Usage:
    from space3.space3_config import Trig, DEFAULT_TRIG

    # Default trig, math.cos / math.sin
    R = Matrix3.rot_z(theta)

    # Approximate trig for a fixed-point pipeline
    R = Matrix3.rot_z(theta, trig=Trig(cos=fast_cos, sin=fast_sin))

The base tolerance can be overridden with the SPACE3_EPSILON environment
variable. It is read once, when this module is imported.
"""

import math
import os
from dataclasses import dataclass
from typing import Callable


# =============================================================================
# Tolerances
# =============================================================================

_DEFAULT_EPSILON = 1e-7


def _read_epsilon() -> float:
    raw = os.environ.get("SPACE3_EPSILON")
    if raw is None:
        return _DEFAULT_EPSILON
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"SPACE3_EPSILON must be a number, got {raw!r}") from None
    if not value > 0.0 or math.isinf(value):
        raise ValueError(f"SPACE3_EPSILON must be positive and finite, got {raw!r}")
    return value


EPSILON: float = _read_epsilon()

# Fuzzy zero / equality tests compare squared distances against this
EPSILON2: float = EPSILON * EPSILON


# =============================================================================
# Trigonometry
# =============================================================================

@dataclass(frozen=True)
class Trig:
    """
    Pair of unary functions used to build rotation matrices.

    Attributes:
        cos: `x` metric function of the rotation.
        sin: `y` metric function of the rotation.
    """
    cos: Callable[[float], float] = math.cos
    sin: Callable[[float], float] = math.sin


DEFAULT_TRIG = Trig()
