from __future__ import annotations

import math

# Full turn in radians
TWO_PI: float = 2.0 * math.pi

# Points along a closed orbit curve (first and last coincide)
DEFAULT_SAMPLE_COUNT: int = 201

# Phase advance per animation tick in radians
DEFAULT_PHASE_STEP_RAD: float = 0.01

# Kilometres per astronomical unit (IAU 2012)
KM_PER_AU: float = 149597870.7
