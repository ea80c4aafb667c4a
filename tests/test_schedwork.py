import pytest

from wordshift.schedwork import DRIVER_AVAILABILITY, format_schedule, main, schedule


def _check_valid(avail, need, max_shifts, sched):
    assert len(sched) == len(avail)
    counts = {}
    for day, workers in enumerate(sched):
        assert len(workers) == need
        assert len(set(workers)) == len(workers)
        for w in workers:
            assert avail[day][w]
            counts[w] = counts.get(w, 0) + 1
    assert all(c <= max_shifts for c in counts.values())


def test_driver_example_has_valid_solution():
    sched = schedule(DRIVER_AVAILABILITY, 2, 2)
    _check_valid(DRIVER_AVAILABILITY, 2, 2, sched)


def test_driver_example_first_solution():
    assert schedule(DRIVER_AVAILABILITY, 2, 2) == [[1, 2], [0, 2], [1, 3], [0, 3]]


def test_empty_availability_has_no_schedule():
    assert schedule([], 1, 1) is None


def test_infeasible_returns_none():
    avail = [[True, False], [True, False]]
    assert schedule(avail, 1, 1) is None


def test_zero_need_gives_empty_days():
    assert schedule([[True], [False]], 0, 0) == [[], []]


def test_no_workers_cannot_meet_need():
    assert schedule([[], []], 1, 3) is None


@pytest.mark.parametrize(
    "avail,need,max_shifts",
    [
        ([[1, 1, 1], [1, 1, 1], [1, 1, 1]], 2, 2),
        ([[1, 0, 1], [0, 1, 1], [1, 1, 0]], 1, 1),
        ([[1, 1], [1, 1], [1, 1], [1, 1]], 1, 2),
    ],
)
def test_solutions_respect_constraints(avail, need, max_shifts):
    sched = schedule(avail, need, max_shifts)
    _check_valid(avail, need, max_shifts, sched)


def test_format_schedule_layout():
    assert format_schedule([[1, 2], [0]]) == "Day 0: 1 2 \nDay 1: 0 \n"


def test_format_empty_schedule():
    assert format_schedule([]) == ""


def test_main_prints_schedule(capsys):
    assert main() == 0
    expected = format_schedule(schedule(DRIVER_AVAILABILITY, 2, 2))
    assert capsys.readouterr().out == expected