"""Domain value types for rootkernel.

This module contains the immutable value types exchanged with the kernel:
- Degree2/3/4PowerPolynomial: Power-basis polynomials built from coefficients or roots
- XY, PlaneXY: Linearized two-unknown systems for Newton iteration
- TrigSolution, LineCircleSolutionType: Angular solutions and their classification
"""

from rootkernel.domain.plane import XY, PlaneXY
from rootkernel.domain.polynomial import (
    Degree2PowerPolynomial,
    Degree3PowerPolynomial,
    Degree4PowerPolynomial,
    VertexFactorization,
)
from rootkernel.domain.trig import LineCircleSolutionType, TrigSolution

__all__ = [
    "XY",
    "Degree2PowerPolynomial",
    "Degree3PowerPolynomial",
    "Degree4PowerPolynomial",
    "LineCircleSolutionType",
    "PlaneXY",
    "TrigSolution",
    "VertexFactorization",
]
