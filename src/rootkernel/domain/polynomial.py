"""Power-basis polynomial value types of degree 2, 3 and 4.

These are small immutable values used to build test polynomials from known
roots and to feed the Bezier converters. Operations that would modify a
polynomial return a new instance.
"""

from dataclasses import dataclass

from rootkernel.utils.numeric import conditional_divide_fraction


@dataclass(frozen=True, slots=True)
class VertexFactorization:
    """Quadratic in completed-square form ``y0 + c * (x - x0)^2``."""

    c: float
    x0: float
    y0: float


@dataclass(frozen=True, slots=True)
class Degree2PowerPolynomial:
    """Quadratic ``c0 + c1*x + c2*x^2``."""

    c0: float = 0.0
    c1: float = 0.0
    c2: float = 0.0

    @property
    def coffs(self) -> tuple[float, float, float]:
        return (self.c0, self.c1, self.c2)

    @staticmethod
    def solve_quadratic(a: float, b: float, c: float) -> list[float] | None:
        """Solve ``a*x^2 + b*x + c = 0``.

        Two distinct roots come back sorted; a double root is reported twice.
        If ``a`` is too small to divide by, the linear equation ``b*x + c = 0``
        is solved instead.

        Args:
            a: Quadratic coefficient
            b: Linear coefficient
            c: Constant coefficient

        Returns:
            List of 1 or 2 roots, or None when there is no real solution.

        Examples:
            >>> Degree2PowerPolynomial.solve_quadratic(1.0, 0.0, -4.0)
            [-2.0, 2.0]
        """
        b1 = conditional_divide_fraction(b, a)
        c1 = conditional_divide_fraction(c, a)
        if b1 is not None and c1 is not None:
            # monic form xx + b1*x + c1 = 0
            q = b1 * b1 - 4.0 * c1
            if q > 0.0:
                e = q**0.5
                return [0.5 * (-b1 - e), 0.5 * (-b1 + e)]
            if q < 0.0:
                return None
            root = -0.5 * b1
            return [root, root]
        x = conditional_divide_fraction(-c, b)
        if x is not None:
            return [x]
        return None

    @classmethod
    def from_roots(cls, root0: float, root1: float, c2: float = 1.0) -> "Degree2PowerPolynomial":
        """Construct ``c2 * (x - root0) * (x - root1)``."""
        return cls(c2 * root0 * root1, -c2 * (root0 + root1), c2)

    def add_constant(self, a: float) -> "Degree2PowerPolynomial":
        return Degree2PowerPolynomial(self.c0 + a, self.c1, self.c2)

    def add_squared_linear_term(self, a: float, b: float, s: float = 1.0) -> "Degree2PowerPolynomial":
        """Return this polynomial plus ``s * (a + b*x)^2``."""
        return Degree2PowerPolynomial(
            self.c0 + s * (a * a),
            self.c1 + s * (2.0 * a * b),
            self.c2 + s * (b * b),
        )

    def real_roots(self) -> list[float] | None:
        """Return the real roots in ascending order, or None."""
        return self.solve_quadratic(self.c2, self.c1, self.c0)

    def evaluate(self, x: float) -> float:
        return self.c0 + x * (self.c1 + x * self.c2)

    def evaluate_derivative(self, x: float) -> float:
        return self.c1 + 2.0 * x * self.c2

    def try_get_vertex_factorization(self) -> VertexFactorization | None:
        """Complete the square, or return None if the quadratic term vanishes."""
        x = conditional_divide_fraction(-self.c1, 2.0 * self.c2)
        if x is None:
            return None
        return VertexFactorization(c=self.c2, x0=x, y0=self.evaluate(x))


@dataclass(frozen=True, slots=True)
class Degree3PowerPolynomial:
    """Cubic ``c0 + c1*x + c2*x^2 + c3*x^3``."""

    c0: float = 0.0
    c1: float = 0.0
    c2: float = 0.0
    c3: float = 1.0

    @property
    def coffs(self) -> tuple[float, float, float, float]:
        return (self.c0, self.c1, self.c2, self.c3)

    @classmethod
    def from_roots(
        cls, root0: float, root1: float, root2: float, c3: float = 1.0
    ) -> "Degree3PowerPolynomial":
        """Construct ``c3 * (x - root0) * (x - root1) * (x - root2)``."""
        return cls(
            -c3 * root0 * root1 * root2,
            c3 * (root0 * root1 + root1 * root2 + root0 * root2),
            -c3 * (root0 + root1 + root2),
            c3,
        )

    def add_constant(self, a: float) -> "Degree3PowerPolynomial":
        return Degree3PowerPolynomial(self.c0 + a, self.c1, self.c2, self.c3)

    def add_squared_linear_term(self, a: float, b: float, s: float = 1.0) -> "Degree3PowerPolynomial":
        """Return this polynomial plus ``s * (a + b*x)^2``."""
        return Degree3PowerPolynomial(
            self.c0 + s * (a * a),
            self.c1 + s * (2.0 * a * b),
            self.c2 + s * (b * b),
            self.c3,
        )

    def evaluate(self, x: float) -> float:
        return self.c0 + x * (self.c1 + x * (self.c2 + x * self.c3))

    def evaluate_derivative(self, x: float) -> float:
        return self.c1 + x * (2.0 * self.c2 + x * 3.0 * self.c3)


@dataclass(frozen=True, slots=True)
class Degree4PowerPolynomial:
    """Quartic ``c0 + c1*x + c2*x^2 + c3*x^3 + c4*x^4``."""

    c0: float = 0.0
    c1: float = 0.0
    c2: float = 0.0
    c3: float = 0.0
    c4: float = 0.0

    @property
    def coffs(self) -> tuple[float, float, float, float, float]:
        return (self.c0, self.c1, self.c2, self.c3, self.c4)

    @classmethod
    def from_roots(
        cls,
        root0: float,
        root1: float,
        root2: float,
        root3: float,
        c4: float = 1.0,
    ) -> "Degree4PowerPolynomial":
        """Construct ``c4 * (x - root0) * (x - root1) * (x - root2) * (x - root3)``."""
        return cls(
            c4 * (root0 * root1 * root2 * root3),
            -c4
            * (
                root0 * root1 * root2
                + root0 * root1 * root3
                + root0 * root2 * root3
                + root1 * root2 * root3
            ),
            c4
            * (
                root0 * root1
                + root0 * root2
                + root0 * root3
                + root1 * root2
                + root1 * root3
                + root2 * root3
            ),
            -c4 * (root0 + root1 + root2 + root3),
            c4,
        )

    def add_constant(self, a: float) -> "Degree4PowerPolynomial":
        return Degree4PowerPolynomial(self.c0 + a, self.c1, self.c2, self.c3, self.c4)

    def evaluate(self, x: float) -> float:
        return self.c0 + x * (self.c1 + x * (self.c2 + x * (self.c3 + x * self.c4)))

    def evaluate_derivative(self, x: float) -> float:
        return self.c1 + x * (2.0 * self.c2 + x * (3.0 * self.c3 + x * 4.0 * self.c4))
