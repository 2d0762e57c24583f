import pytest

from motorsim.blocks import Motor, Regulator
from motorsim.program import HIGH_SPEED, LOW_SPEED, CyclicProgram, main


def test_disabled_sets_speed_to_zero_and_keeps_state():
    program = CyclicProgram(enable=False, count=7, speed=12.0)
    sample = program.cycle()
    assert sample.speed == 0.0
    assert program.count == 7
    assert program.motor.w == 0.0
    assert program.motor1.phi == 0.0


def test_enabled_counts_up_and_uses_low_speed():
    program = CyclicProgram()
    sample = program.cycle()
    assert sample.count == 1
    assert sample.speed == LOW_SPEED


@pytest.mark.parametrize(
    "start_count, expected",
    [(998, LOW_SPEED), (999, HIGH_SPEED), (1499, HIGH_SPEED), (1500, LOW_SPEED)],
)
def test_speed_profile_window(start_count, expected):
    program = CyclicProgram(count=start_count)
    assert program.cycle().speed == expected


def test_first_motor_gets_set_point_times_ke():
    program = CyclicProgram(motor=Motor(ke=2.0))
    program.cycle()
    assert program.motor.u == pytest.approx(LOW_SPEED * 2.0)


def test_second_motor_uses_previous_regulator_output():
    controller = Regulator(u=2.0)
    program = CyclicProgram(controller=controller, motor1=Motor(ke=3.0))
    program.cycle()
    assert program.motor1.u == pytest.approx((LOW_SPEED - 2.0) * 3.0)


def test_regulator_error_uses_speed_before_motor_step():
    program = CyclicProgram(motor=Motor(w=1.5))
    program.cycle()
    assert program.controller.e == pytest.approx(LOW_SPEED - 1.5)


def test_run_returns_one_sample_per_cycle():
    program = CyclicProgram()
    samples = program.run(25)
    assert [s.count for s in samples] == list(range(1, 26))
    assert program.count == 25


def test_run_zero_cycles_changes_nothing():
    program = CyclicProgram()
    assert program.run(0) == []
    assert program.count == 0


def test_run_negative_cycles_raises():
    with pytest.raises(ValueError):
        CyclicProgram().run(-1)


def test_directly_driven_motor_settles_at_set_point():
    program = CyclicProgram()
    samples = program.run(999)
    assert samples[-1].w == pytest.approx(LOW_SPEED, abs=0.01)


def test_position_grows_while_speed_positive():
    program = CyclicProgram()
    samples = program.run(50)
    phis = [s.phi for s in samples]
    assert all(later > earlier for earlier, later in zip(phis, phis[1:]))


def test_main_prints_header_and_sampled_lines(capsys):
    assert main(["--cycles", "10", "--every", "5"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0] == "count,speed,u,w,phi,w1,phi1"
    assert [line.split(",")[0] for line in lines[1:]] == ["5", "10"]


def test_main_disabled_reports_zero_speed(capsys):
    main(["--cycles", "3", "--every", "1", "--disable"])
    lines = capsys.readouterr().out.strip().splitlines()[1:]
    assert len(lines) == 3
    assert all(line.split(",")[:2] == ["0", "0"] for line in lines)


def test_main_rejects_negative_cycles():
    with pytest.raises(SystemExit) as excinfo:
        main(["--cycles", "-3"])
    assert excinfo.value.code == 2