# motorsim

A small discrete-time simulation of DC motors driven from a stepped speed
set point and a limited PI regulator, together with PLC-style helpers for
runtime codes, byte order and time values.

## Modules

### `motorsim.blocks`

The function blocks the simulation is built from. Each block holds its
inputs, parameters and outputs as dataclass fields; call `step()` once per
cycle.

- `Integrator` – forward-Euler accumulator: `out += input * dt`. `step()`
  returns the new `out`.
- `Motor` – first-order speed model. With voltage `u`, constant `ke` and
  time constant `tm`, each step integrates `(u / ke - w) / tm` into the
  speed `w` and then `w` into the angle `phi`. Defaults: `ke=1.0`,
  `tm=1.0`, `dt=0.01`. `step()` returns the new `w`.
- `Regulator` – PI regulator with output limit `max_abs_value` and
  anti-windup feedback `iy_old`. The integral part accumulates
  `e * k_i * dt + iy_old`. The output `u` is `max_abs_value` when the
  unlimited output is above the limit, `-max_abs_value` when it is below
  the limit, and the unlimited value only when it equals the limit exactly;
  `iy_old` is then set to `u - unlimited_u`. Defaults: `k_p=1.0`,
  `k_i=0.0`, `dt=0.01`, `max_abs_value=1.0`. `step()` returns `u`.

### `motorsim.program`

`CyclicProgram` wires a `Regulator` and two motors together. While
`enable` is true, each `cycle()` increments `count`, sets `speed` to
`HIGH_SPEED` (40) for counts 1000 to 1500 and to `LOW_SPEED` (5)
otherwise, feeds `motor` the set point directly and `motor1` the set point
reduced by the regulator output of the previous cycle, and lets the
regulator work on the speed error of `motor`. While disabled, `speed` is 0
and nothing else changes.

`cycle()` returns a frozen `Sample` (`count`, `speed`, `controller_u`,
`w`, `phi`, `w1`, `phi1`); `run(cycles)` returns a list of them and raises
`ValueError` for a negative count.

### `motorsim.runtime`

- `IecDataType` – codes of the IEC 61131-3 elementary data types.
- `ErrorCode` – function block status codes (`OK`, `FUB_BUSY`, ...).
- `RTrig`, `FTrig`, `RFTrig` – rising, falling and either-edge detectors;
  `update(clk)` returns and stores the output `q`.
- `get_time()` – monotonic time in milliseconds.
- `real_tan`, `real_atan`, `real_asin`, `real_acos`, `real_exp`,
  `real_ln` (natural log), `real_log` (base 10), `real_expt(x, y)`,
  `real_abs`, `real_sin`, `real_cos`, `real_sqrt`.

### `motorsim.byteorder`

`swap(value, kind)` reverses the bytes of a value of one of the `WordKind`
members (`INT`, `UINT`, `WORD`, `DINT`, `UDINT`, `DWORD`, `TIME`, `DT`,
`DATE`, `TOD`, `REAL`, `LREAL`). `host_to_network` and `network_to_host`
convert between host order and big-endian order. A value that does not fit
its kind raises `ValueError`.

### `motorsim.astime`

TIME values are milliseconds in `[TIME_MIN, TIME_MAX]`; DATE_AND_TIME
values are seconds since 1970-01-01 UTC in `[0, DATE_AND_TIME_MAX]`.

- `time_to_structure` / `structure_to_time` – TIME to and from
  `TimeStructure`.
- `dt_to_structure` / `structure_to_dt` – DATE_AND_TIME to and from
  `DTStructure` (`wday` 0 is Sunday).
- `asc_time`, `asc_time_structure` – IEC literal such as `T#1d2h3m4s5ms`.
- `asc_dt`, `asc_dt_structure` – text such as `Thu Jan  1 00:00:00 1970`.
- `diff_t`, `diff_dt` – differences; the later value must come first.
- `clock_ms()` – monotonic clock in milliseconds.

Invalid input raises `AsTimeError` (a `ValueError`) whose `code` is a
`TimeErrorCode`. `DstState` and `TimeDevice` list daylight-saving states
and clock sources.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Running the simulation

```
motorsim
```

runs the cyclic program for 2000 cycles and prints a CSV header
`count,speed,u,w,phi,w1,phi1` followed by every 100th sample. Options:
`--cycles`, `--every`, `--dt`, `--kp`, `--ki`, `--limit` and `--disable`;
see `motorsim --help`.

From Python:

```python
from motorsim.program import CyclicProgram

samples = CyclicProgram().run(2000)
print(samples[-1].w)
```

A block on its own:

```python
from motorsim.blocks import Motor

motor = Motor(u=10.0)
motor.step()
print(motor.w, motor.phi)
```

## What it does not do

The package only computes; it talks to no controller or drive hardware.
It cannot read or set a system clock, and it has no time-zone or
daylight-saving conversions: `DstState` and `TimeDevice` are code lists
only.