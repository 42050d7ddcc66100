import math

import pytest

from dax.fmath.bits import f32, inf, nan
from dax.fmath.hyperbolic import acosh, asinh

VF = [
    f32(v)
    for v in (
        4.9790119248836735e00,
        7.7388724745781045e00,
        -2.7688005719200159e-01,
        -5.0106036182710749e00,
        9.6362937071984173e00,
        2.9263772392439646e00,
        5.2290834314593066e00,
        2.7279399104360102e00,
        1.8253080916808550e00,
        -8.6859247685756013e00,
    )
]

ACOSH = [
    2.4743347004159012494457618e00,
    2.8576385344292769649802701e00,
    7.2796961502981066190593175e-01,
    2.4796794418831451156471977e00,
    3.0552020742306061857212962e00,
    2.044238592688586588942468e00,
    2.5158701513104513595766636e00,
    1.99050839282411638174299e00,
    1.6988625798424034227205445e00,
    2.9611454842470387925531875e00,
]

ASINH = [
    2.3083139297413506341172251e00,
    2.7435516011574954120533221e00,
    -2.7345908387810202722079111e-01,
    -2.3145157272104217582864294e00,
    2.9613651848542041911116485e00,
    1.7949041801560461362186061e00,
    2.3564033106207471490733951e00,
    1.7287118562561185619586013e00,
    1.3626658049154742879949254e00,
    -2.8581483353680638970217842e00,
]


@pytest.mark.parametrize("value,expected", list(zip(VF, ACOSH)))
def test_acosh_values(value, expected):
    assert acosh(f32(1 + abs(value))) == pytest.approx(expected, rel=2e-6)


@pytest.mark.parametrize(
    "value,expected",
    [(float("-inf"), float("nan")), (0.5, float("nan")), (1.0, 0.0),
     (float("inf"), float("inf")), (float("nan"), float("nan"))],
)
def test_acosh_special_cases(value, expected):
    assert repr(acosh(value)) == repr(expected)


def test_acosh_of_package_special_values():
    assert repr(acosh(inf(1))) == "inf"
    assert repr(acosh(nan())) == "nan"


def test_acosh_large_argument():
    assert acosh(1e30) == pytest.approx(math.acosh(1e30), rel=1e-5)


@pytest.mark.parametrize("value,expected", list(zip(VF, ASINH)))
def test_asinh_values(value, expected):
    assert asinh(value) == pytest.approx(expected, rel=1e-5)


def test_asinh_large_argument():
    assert asinh(2e20) == pytest.approx(math.asinh(2e20), rel=1e-5)


@pytest.mark.parametrize(
    "value,expected",
    [
        (float("-inf"), float("-inf")),
        (-0.0, -0.0),
        (0.0, 0.0),
        (float("inf"), float("inf")),
        (float("nan"), float("nan")),
    ],
)
def test_asinh_special_cases(value, expected):
    assert repr(asinh(value)) == repr(expected)


def test_asinh_is_odd():
    assert asinh(-1.5) == -asinh(1.5)


def test_asinh_tiny_argument_is_identity():
    tiny = f32(1e-10)
    assert asinh(tiny) == tiny