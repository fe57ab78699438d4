import math
import warnings

import pytest

from vectorkit import LengthMismatchError, add, construct, divide, from_values, length, scale, subtract


def test_add_concrete_scenario() -> None:
    a = from_values([1.0, 2.0, 3.0])
    b = from_values([4.0, 5.0, 6.0])
    result = add(a, b)
    assert result.tolist() == [5.0, 7.0, 9.0]


def test_add_is_elementwise_and_leaves_inputs_untouched() -> None:
    a = from_values([0.5, -1.0, 10.0, 3.25])
    b = from_values([1.5, 2.0, -4.0, 0.0])
    result = add(a, b)
    for i in range(length(a)):
        assert result[i] == a[i] + b[i]
    assert a.tolist() == [0.5, -1.0, 10.0, 3.25]
    assert b.tolist() == [1.5, 2.0, -4.0, 0.0]
    assert result is not a and result is not b


def test_subtract() -> None:
    result = subtract(from_values([5.0, 7.0]), from_values([1.0, 10.0]))
    assert result.tolist() == [4.0, -3.0]


def test_add_empty_vectors() -> None:
    assert length(add(construct(0), construct(0))) == 0


@pytest.mark.parametrize("op", [add, subtract])
def test_length_mismatch_message(op) -> None:
    with pytest.raises(LengthMismatchError) as excinfo:
        op(from_values([1.0, 2.0, 3.0]), from_values([1.0, 2.0]))
    assert str(excinfo.value) == "Attempting to add vectors of unequal length: 3 - 2"
    assert excinfo.value.left == 3
    assert excinfo.value.right == 2


def test_length_mismatch_is_value_error() -> None:
    with pytest.raises(ValueError):
        add(construct(1), construct(2))


def test_scale_and_divide() -> None:
    a = from_values([1.0, -2.0, 4.0])
    assert scale(a, 2.5).tolist() == [2.5, -5.0, 10.0]
    assert divide(a, 4.0).tolist() == [0.25, -0.5, 1.0]
    assert a.tolist() == [1.0, -2.0, 4.0]


def test_divide_by_zero_propagates_ieee_values() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        result = divide(from_values([1.0, -1.0, 0.0]), 0)
    assert result[0] == math.inf
    assert result[1] == -math.inf
    assert math.isnan(result[2])
