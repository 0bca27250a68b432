"""Newton iteration framework for one and two unknowns.

The base class owns the convergence policy; concrete iterators own the
dimension-specific state. Callers supply small evaluator objects that compute
the function (and derivatives where required) at the current estimate.

Iteration is: compute step, test convergence, apply step. Convergence is only
accepted after ``successive_convergence_target`` consecutive small steps, and
the step that completes convergence is still applied as a final correction.

Example:
    class Sqrt2(NewtonEvaluatorRtoRD):
        def evaluate(self, x: float) -> bool:
            self.current_f = x * x - 2.0
            self.current_dfdx = 2.0 * x
            return True

    newton = Newton1dUnbounded(Sqrt2())
    newton.set_x(1.0)
    if newton.run_iterations():
        root = newton.get_x()
"""

import logging
from abc import ABC, abstractmethod

from rootkernel.config.settings import NewtonConfig
from rootkernel.core.linear import linear_system_2d
from rootkernel.domain import XY, PlaneXY
from rootkernel.utils.numeric import conditional_divide_fraction, max_abs_xy

logger = logging.getLogger(__name__)

_DEFAULTS = NewtonConfig()


class AbstractNewtonIterator(ABC):
    """Convergence controller shared by all Newton iterators.

    Args:
        step_size_tolerance: Relative step size considered converged. Because
            two successive small steps are required, a moderately strict value
            (10 to 12 digits) is enough; the extra step usually reaches full
            double precision.
        successive_convergence_target: Number of consecutive small steps needed
        max_iterations: Iteration budget
    """

    def __init__(
        self,
        step_size_tolerance: float = _DEFAULTS.step_size_tolerance,
        successive_convergence_target: int = _DEFAULTS.successive_convergence_target,
        max_iterations: int = _DEFAULTS.max_iterations,
    ) -> None:
        self._step_size_tolerance = step_size_tolerance
        self._successive_convergence_target = successive_convergence_target
        self._max_iterations = max_iterations
        self._num_accepted = 0
        self.num_iterations = 0

    @classmethod
    def config_kwargs(cls, config: NewtonConfig | None) -> dict[str, float | int]:
        """Translate a NewtonConfig into constructor keyword arguments."""
        config = config or _DEFAULTS
        return {
            "step_size_tolerance": config.step_size_tolerance,
            "successive_convergence_target": config.successive_convergence_target,
            "max_iterations": config.max_iterations,
        }

    @abstractmethod
    def compute_step(self) -> bool:
        """Evaluate at the current point and compute a step. False if evaluation fails."""

    @abstractmethod
    def current_step_size(self) -> float:
        """Return the just-computed step, relative to the size of the variables."""

    @abstractmethod
    def apply_current_step(self, is_final_step: bool) -> bool:
        """Move the variables by the current step."""

    def test_convergence(self, delta: float) -> bool:
        """Record a step size and report whether enough small steps occurred in a row."""
        if abs(delta) < self._step_size_tolerance:
            self._num_accepted += 1
            return self._num_accepted >= self._successive_convergence_target
        self._num_accepted = 0
        return False

    def run_iterations(self) -> bool:
        """Iterate until converged, the budget is spent, or a step cannot be computed.

        Returns:
            True if converged. The converged value is then available from the
            concrete iterator's accessors.
        """
        self._num_accepted = 0
        self.num_iterations = 0
        while self.num_iterations < self._max_iterations:
            self.num_iterations += 1
            if not self.compute_step():
                logger.debug(
                    "Newton step failed (%s, iteration=%d)",
                    type(self).__name__,
                    self.num_iterations,
                )
                return False
            if self.test_convergence(self.current_step_size()) and self.apply_current_step(True):
                return True
            self.apply_current_step(False)
        logger.debug(
            "Newton iteration exhausted (%s, max_iterations=%d)",
            type(self).__name__,
            self._max_iterations,
        )
        return False


class NewtonEvaluatorRtoRD(ABC):
    """Function of one variable that reports its value and derivative.

    ``evaluate`` must store the results in ``current_f`` and ``current_dfdx``.
    """

    def __init__(self) -> None:
        self.current_f = 0.0
        self.current_dfdx = 0.0

    @abstractmethod
    def evaluate(self, x: float) -> bool:
        """Evaluate at x. Return False if the function is undefined there."""


class NewtonEvaluatorRtoR(ABC):
    """Function of one variable that reports only its value in ``current_f``."""

    def __init__(self) -> None:
        self.current_f = 0.0

    @abstractmethod
    def evaluate(self, x: float) -> bool:
        """Evaluate at x. Return False if the function is undefined there."""


class NewtonEvaluatorRRtoRRD(ABC):
    """Function of two variables with two components and their partial derivatives.

    ``evaluate`` must store a PlaneXY in ``current_f``: the origin is the
    function value, ``vector_u`` and ``vector_v`` are the partials.
    """

    def __init__(self) -> None:
        self.current_f = PlaneXY()

    @abstractmethod
    def evaluate(self, u: float, v: float) -> bool:
        """Evaluate at (u, v). Return False if the function is undefined there."""


class Newton1dUnbounded(AbstractNewtonIterator):
    """Newton iteration when both the function and its derivative are available."""

    def __init__(self, func: NewtonEvaluatorRtoRD, config: NewtonConfig | None = None) -> None:
        super().__init__(**self.config_kwargs(config))
        self._func = func
        self._current_x = 0.0
        self._current_step = 0.0
        self._target = 0.0

    def set_x(self, x: float) -> bool:
        self._current_x = x
        return True

    def get_x(self) -> float:
        return self._current_x

    def set_target(self, y: float) -> None:
        """Iterate toward ``f(x) = y`` instead of ``f(x) = 0``."""
        self._target = y

    def apply_current_step(self, is_final_step: bool = False) -> bool:
        return self.set_x(self._current_x - self._current_step)

    def compute_step(self) -> bool:
        if self._func.evaluate(self._current_x):
            dx = conditional_divide_fraction(
                self._func.current_f - self._target, self._func.current_dfdx
            )
            if dx is not None:
                self._current_step = dx
                return True
        return False

    def current_step_size(self) -> float:
        return abs(self._current_step / (1.0 + abs(self._current_x)))


class Newton1dUnboundedApproximateDerivative(AbstractNewtonIterator):
    """Newton iteration with a forward-difference derivative estimate."""

    def __init__(self, func: NewtonEvaluatorRtoR, config: NewtonConfig | None = None) -> None:
        super().__init__(**self.config_kwargs(config))
        self._func = func
        self._current_x = 0.0
        self._current_step = 0.0
        self.derivative_h = (config or _DEFAULTS).derivative_h

    def set_x(self, x: float) -> bool:
        self._current_x = x
        return True

    def get_x(self) -> float:
        return self._current_x

    def apply_current_step(self, is_final_step: bool = False) -> bool:
        return self.set_x(self._current_x - self._current_step)

    def compute_step(self) -> bool:
        if not self._func.evaluate(self._current_x):
            return False
        f_a = self._func.current_f
        if not self._func.evaluate(self._current_x + self.derivative_h):
            return False
        f_b = self._func.current_f
        dx = conditional_divide_fraction(f_a, (f_b - f_a) / self.derivative_h)
        if dx is None:
            return False
        self._current_step = dx
        return True

    def current_step_size(self) -> float:
        return abs(self._current_step / (1.0 + abs(self._current_x)))


class Newton2dUnboundedWithDerivative(AbstractNewtonIterator):
    """Newton iteration in two unknowns using a caller-supplied Jacobian."""

    def __init__(self, func: NewtonEvaluatorRRtoRRD, config: NewtonConfig | None = None) -> None:
        super().__init__(**self.config_kwargs(config))
        self._func = func
        self._current_uv = XY()
        self._current_step = XY()

    def set_uv(self, u: float, v: float) -> bool:
        self._current_uv = XY(u, v)
        return True

    def get_u(self) -> float:
        return self._current_uv.x

    def get_v(self) -> float:
        return self._current_uv.y

    def apply_current_step(self, is_final_step: bool = False) -> bool:
        return self.set_uv(
            self._current_uv.x - self._current_step.x,
            self._current_uv.y - self._current_step.y,
        )

    def compute_step(self) -> bool:
        """Evaluate at the current (u, v) and solve the Jacobian system for the step."""
        if not self._func.evaluate(self._current_uv.x, self._current_uv.y):
            return False
        plane = self._func.current_f
        step = linear_system_2d(
            plane.vector_u.x,
            plane.vector_v.x,
            plane.vector_u.y,
            plane.vector_v.y,
            plane.origin.x,
            plane.origin.y,
        )
        if step is None:
            return False
        self._current_step = step
        return True

    def current_step_size(self) -> float:
        """Return the larger relative step of the two components."""
        return max_abs_xy(
            self._current_step.x / (1.0 + abs(self._current_uv.x)),
            self._current_step.y / (1.0 + abs(self._current_uv.y)),
        )
