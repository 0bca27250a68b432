"""Two-dimensional value types for linearized Newton systems.

A 2-unknown Newton evaluator reports the function value and its two partial
derivatives at ``(u, v)`` as a plane: the origin is ``F(u, v)``, ``vector_u``
is ``dF/du`` and ``vector_v`` is ``dF/dv``.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class XY:
    """An (x, y) pair used for both points and vectors.

    Attributes:
        x: First component
        y: Second component
    """

    x: float = 0.0
    y: float = 0.0

    def to_tuple(self) -> tuple[float, float]:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class PlaneXY:
    """Origin and two direction vectors, all in xy.

    Attributes:
        origin: Function value F(u, v)
        vector_u: Partial derivative with respect to u
        vector_v: Partial derivative with respect to v
    """

    origin: XY = XY()
    vector_u: XY = XY(1.0, 0.0)
    vector_v: XY = XY(0.0, 1.0)

    @classmethod
    def from_components(
        cls,
        fx: float,
        fy: float,
        dfx_du: float,
        dfy_du: float,
        dfx_dv: float,
        dfy_dv: float,
    ) -> "PlaneXY":
        """Build from the six scalars of a value and its Jacobian columns."""
        return cls(XY(fx, fy), XY(dfx_du, dfy_du), XY(dfx_dv, dfy_dv))

    def evaluate(self, u: float, v: float) -> XY:
        """Return ``origin + u * vector_u + v * vector_v``."""
        return XY(
            self.origin.x + u * self.vector_u.x + v * self.vector_v.x,
            self.origin.y + u * self.vector_u.y + v * self.vector_v.y,
        )
