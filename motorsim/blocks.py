"""Integrator, DC motor and saturating PI regulator function blocks."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Integrator", "Motor", "Regulator"]


@dataclass
class Integrator:
    """Forward-Euler integrator: ``out += input * dt`` on every step."""

    input: float = 0.0
    dt: float = 1.0
    out: float = 0.0

    def step(self) -> float:
        self.out += self.input * self.dt
        return self.out


@dataclass
class Motor:
    """First-order DC motor model driven by voltage ``u``.

    Angular speed ``w`` follows ``dw/dt = (u / ke - w) / tm`` and the
    angle ``phi`` is the integral of ``w``.
    """

    u: float = 0.0
    ke: float = 1.0
    tm: float = 1.0
    dt: float = 0.01
    w: float = 0.0
    phi: float = 0.0
    speed_integrator: Integrator = field(default_factory=Integrator)
    position_integrator: Integrator = field(default_factory=Integrator)

    def step(self) -> float:
        """Advance the model by one time step and return the new speed."""
        self.speed_integrator.input = (self.u / self.ke - self.w) / self.tm
        self.speed_integrator.dt = self.dt
        self.w = self.speed_integrator.step()

        self.position_integrator.input = self.w
        self.position_integrator.dt = self.dt
        self.phi = self.position_integrator.step()
        return self.w


@dataclass
class Regulator:
    """PI regulator with output limiting and back-calculation anti-windup.

    The integral term accumulates ``e * k_i * dt`` plus the previous
    saturation excess ``iy_old``. Its integrator keeps its own ``dt``.
    The output is set to ``max_abs_value`` when the unlimited output
    exceeds it, to ``-max_abs_value`` when it is below it, and passes
    through unchanged only when equal to it.
    """

    e: float = 0.0
    k_p: float = 1.0
    k_i: float = 0.0
    dt: float = 0.01
    max_abs_value: float = 1.0
    u: float = 0.0
    iy_old: float = 0.0
    integrator: Integrator = field(default_factory=Integrator)

    def step(self) -> float:
        """Compute a new output from the current error and return it."""
        p_term = self.e * self.k_p
        self.integrator.input = self.e * self.k_i * self.dt + self.iy_old
        self.integrator.step()

        unlimited_u = p_term + self.integrator.out

        if unlimited_u > self.max_abs_value:
            self.u = self.max_abs_value
        elif unlimited_u < self.max_abs_value:
            self.u = -self.max_abs_value
        else:
            self.u = unlimited_u

        self.iy_old = self.u - unlimited_u
        return self.u