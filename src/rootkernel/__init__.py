"""Rootkernel - Analytic and iterative root finding for computational geometry.

Rootkernel is the numeric core used wherever a geometry library needs an exact
parametric value: curve-curve intersection, point projection onto a curve,
circle/ellipse solving. It provides:

- Closed-form real roots of polynomials of degree 1 to 4
- Bezier-basis polynomials with subdivision, deflation and Newton polishing
- Trigonometric root conversion (unit circle against quadric or ellipse)
- A Newton iteration framework for one and two unknowns

Example:
    $ rootkernel solve -- -2 0 1

This prints the two real roots of x^2 - 2 = 0.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
