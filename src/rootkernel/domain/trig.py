"""Value types for trigonometric root problems.

- TrigSolution: One angular solution as (cos, sin, radians)
- LineCircleSolutionType: Classification of a line / unit circle intersection
"""

import math
from dataclasses import dataclass
from enum import IntEnum


class LineCircleSolutionType(IntEnum):
    """Outcome of intersecting ``alpha + beta*c + gamma*s = 0`` with the unit circle.

    Values are the integer codes callers compare against:
    - ALL_SOLUTIONS (-2): all coefficients zero, every circle point solves it
    - NO_LINE (-1): beta and gamma are zero but alpha is not
    - NO_INTERSECTION (0): the line passes outside the circle
    - TANGENT (1): the line touches the circle within tolerance
    - TWO_INTERSECTIONS (2): two simple crossings
    """

    ALL_SOLUTIONS = -2
    NO_LINE = -1
    NO_INTERSECTION = 0
    TANGENT = 1
    TWO_INTERSECTIONS = 2


@dataclass(frozen=True, slots=True)
class TrigSolution:
    """An angle together with its cosine and sine.

    Attributes:
        cos: Cosine of the angle
        sin: Sine of the angle
        radians: Angle from ``atan2(sin, cos)``
    """

    cos: float
    sin: float
    radians: float

    @classmethod
    def from_cos_sin(cls, c: float, s: float) -> "TrigSolution":
        """Build from a (cos, sin) pair; the angle comes from atan2 so its quadrant is exact."""
        return cls(cos=c, sin=s, radians=math.atan2(s, c))

    @classmethod
    def from_radians(cls, radians: float) -> "TrigSolution":
        return cls(cos=math.cos(radians), sin=math.sin(radians), radians=radians)

    def unit_error(self) -> float:
        """Return ``|cos^2 + sin^2 - 1|``."""
        return abs(self.cos * self.cos + self.sin * self.sin - 1.0)
