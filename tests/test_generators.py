import numpy as np
import pytest

from interpolation_benchmark.generators import (
    GENERATORS,
    get_generator,
    make_list_cubic,
    make_list_linear,
    make_list_linear_outlier,
    make_list_log,
    make_list_quadratic,
    make_list_random,
    make_rng,
)


DETERMINISTIC = ["Linear", "Linear Outlier", "Quadratic", "Cubic", "Log"]


@pytest.mark.parametrize("name", list(GENERATORS))
@pytest.mark.parametrize("count", [1, 2, 3, 17, 250])
def test_lists_are_sorted_with_requested_length(name: str, count: int) -> None:
    values = GENERATORS[name](count, 2000, make_rng(7))
    assert len(values) == count
    assert all(a <= b for a, b in zip(values, values[1:]))
    assert all(isinstance(v, int) for v in values)


@pytest.mark.parametrize("name", [n for n in GENERATORS if n != "Linear Outlier"])
def test_values_stay_within_bound(name: str) -> None:
    values = GENERATORS[name](300, 2000, make_rng(3))
    assert min(values) >= 0
    assert max(values) <= 2000


@pytest.mark.parametrize("name", DETERMINISTIC)
def test_deterministic_generators_repeat(name: str) -> None:
    make_list = GENERATORS[name]
    assert make_list(123, 500, make_rng(1)) == make_list(123, 500, make_rng(2))
    assert make_list(123, 500) == make_list(123, 500)


def test_linear_values() -> None:
    assert make_list_linear(11, 100) == [0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100]
    assert make_list_linear(1, 100) == [0]


def test_linear_outlier_replaces_last_value() -> None:
    assert make_list_linear_outlier(11, 100) == [0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 10000]
    assert make_list_linear_outlier(1, 100) == [10000]


def test_quadratic_and_cubic_values() -> None:
    assert make_list_quadratic(5, 16) == [0, 1, 4, 9, 16]
    assert make_list_cubic(3, 8) == [0, 1, 8]


def test_log_ends_at_bound() -> None:
    values = make_list_log(50, 2000)
    assert values[-1] == 2000
    assert make_list_log(1, 2000) == [2000]


def test_random_is_reproducible_with_seed() -> None:
    assert make_list_random(100, 2000, make_rng(42)) == make_list_random(100, 2000, make_rng(42))


def test_random_draws_bound_inclusive() -> None:
    values = make_list_random(2000, 1, make_rng(5))
    assert set(values) == {0, 1}


def test_make_rng_accepts_seed_sequence() -> None:
    seed_sequence = np.random.SeedSequence(9)
    assert make_rng(seed_sequence).integers(0, 1000) == make_rng(9).integers(0, 1000)


def test_get_generator_rejects_unknown_name() -> None:
    assert get_generator("Log") is make_list_log
    with pytest.raises(ValueError):
        get_generator("Exponential")
