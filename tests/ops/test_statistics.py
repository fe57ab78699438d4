import math

import pytest

from vectorkit import (
    EmptyVectorError,
    InvalidVectorError,
    construct,
    fill,
    from_values,
    mean,
    min_max,
    std_dev,
    value_range,
    vector_sum,
)


class TestConcreteScenario:
    def setup_method(self) -> None:
        self.vec = from_values([1.0, 2.0, 3.0, 4.0])

    def test_sum(self) -> None:
        assert vector_sum(self.vec) == 10.0

    def test_mean(self) -> None:
        assert mean(self.vec) == 2.5

    def test_range(self) -> None:
        assert value_range(self.vec) == 3.0

    def test_std_dev_is_population(self) -> None:
        assert std_dev(self.vec) == pytest.approx(math.sqrt(1.25))
        assert std_dev(self.vec) == pytest.approx(1.1180, abs=1e-4)


@pytest.mark.parametrize("n,c", [(1, 3.0), (5, -2.5), (10, 0.1), (3, 0.1), (7, 0.3)])
def test_mean_of_constant_vector_is_exact(n: int, c: float) -> None:
    assert mean(fill(n, c)) == c


@pytest.mark.parametrize("n,c", [(1, 3.0), (4, 7.0), (6, 0.0), (3, 0.1), (7, 0.3), (5, -1e-7)])
def test_std_dev_of_constant_vector_is_zero(n: int, c: float) -> None:
    assert std_dev(fill(n, c)) == 0.0


def test_sum_of_empty_vector_is_zero() -> None:
    assert vector_sum(construct(0)) == 0.0


def test_mean_and_std_of_empty_vector_are_nan() -> None:
    assert math.isnan(mean(construct(0)))
    assert math.isnan(std_dev(construct(0)))


def test_range_of_empty_vector_raises() -> None:
    with pytest.raises(EmptyVectorError):
        value_range(construct(0))


def test_min_max_single_scan() -> None:
    assert min_max(from_values([3.0, -1.0, 8.0, 2.0])) == (-1.0, 8.0)
    assert value_range(from_values([5.0])) == 0.0


@pytest.mark.parametrize("op", [vector_sum, mean, value_range, std_dev])
def test_statistics_reject_none(op) -> None:
    with pytest.raises(InvalidVectorError):
        op(None)


def test_mean_and_std_with_infinite_first_element() -> None:
    vec = from_values([math.inf, 1.0])
    assert mean(vec) == math.inf
    assert math.isnan(std_dev(vec))
