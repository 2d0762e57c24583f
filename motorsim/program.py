"""Cyclic task that drives two simulated motors from a stepped speed set point."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field

from motorsim.blocks import Motor, Regulator

__all__ = ["Sample", "CyclicProgram", "main", "LOW_SPEED", "HIGH_SPEED"]

LOW_SPEED = 5.0
HIGH_SPEED = 40.0
_STEP_START = 1000
_STEP_END = 1500


@dataclass(frozen=True)
class Sample:
    """State of the program after one cycle."""

    count: int
    speed: float
    controller_u: float
    w: float
    phi: float
    w1: float
    phi1: float


@dataclass
class CyclicProgram:
    """Speed set-point profile feeding a directly driven and a corrected motor.

    While enabled, each cycle counts up; the set point is ``HIGH_SPEED``
    for counts 1000 to 1500 and ``LOW_SPEED`` otherwise. ``motor`` is fed
    the set point directly, ``motor1`` the set point reduced by the
    regulator output of the previous cycle. The regulator works on the
    speed error of ``motor``. When disabled the set point is zero and
    nothing else changes.
    """

    enable: bool = True
    count: int = 0
    speed: float = 0.0
    controller: Regulator = field(default_factory=Regulator)
    motor: Motor = field(default_factory=Motor)
    motor1: Motor = field(default_factory=Motor)

    def cycle(self) -> Sample:
        """Run one cycle of the task and return the resulting state."""
        if self.enable:
            self.count += 1
            if _STEP_START <= self.count <= _STEP_END:
                self.speed = HIGH_SPEED
            else:
                self.speed = LOW_SPEED

            self.controller.e = self.speed - self.motor.w
            self.motor.u = self.speed * self.motor.ke
            self.motor1.u = (self.speed - self.controller.u) * self.motor1.ke

            self.controller.step()
            self.motor.step()
            self.motor1.step()
        else:
            self.speed = 0.0
        return self._sample()

    def run(self, cycles: int) -> list[Sample]:
        """Run ``cycles`` cycles and return the state after each of them."""
        if cycles < 0:
            raise ValueError(f"number of cycles must not be negative, got {cycles}")
        return [self.cycle() for _ in range(cycles)]

    def _sample(self) -> Sample:
        return Sample(
            count=self.count,
            speed=self.speed,
            controller_u=self.controller.u,
            w=self.motor.w,
            phi=self.motor.phi,
            w1=self.motor1.w,
            phi1=self.motor1.phi,
        )


def _format(sample: Sample) -> str:
    return ",".join(
        [
            str(sample.count),
            f"{sample.speed:g}",
            f"{sample.controller_u:.6g}",
            f"{sample.w:.6g}",
            f"{sample.phi:.6g}",
            f"{sample.w1:.6g}",
            f"{sample.phi1:.6g}",
        ]
    )


def main(argv: list[str] | None = None) -> int:
    """Simulate the cyclic task and print samples as CSV lines."""
    parser = argparse.ArgumentParser(
        prog="motorsim", description="Simulate two motors driven by a speed profile."
    )
    parser.add_argument("--cycles", type=int, default=2000, help="number of cycles to run")
    parser.add_argument("--every", type=int, default=100, help="print every N-th cycle")
    parser.add_argument("--dt", type=float, default=0.01, help="time step of the blocks")
    parser.add_argument("--kp", type=float, default=1.0, help="proportional gain")
    parser.add_argument("--ki", type=float, default=0.0, help="integral gain")
    parser.add_argument("--limit", type=float, default=1.0, help="regulator output limit")
    parser.add_argument("--disable", action="store_true", help="run with the task disabled")
    args = parser.parse_args(argv)

    if args.cycles < 0:
        parser.error("--cycles must not be negative")
    if args.every <= 0:
        parser.error("--every must be positive")

    program = CyclicProgram(
        enable=not args.disable,
        controller=Regulator(k_p=args.kp, k_i=args.ki, dt=args.dt, max_abs_value=args.limit),
        motor=Motor(dt=args.dt),
        motor1=Motor(dt=args.dt),
    )

    print("count,speed,u,w,phi,w1,phi1")
    for index, sample in enumerate(program.run(args.cycles), start=1):
        if index % args.every == 0:
            print(_format(sample))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())