"""Easing curves mapping progress in [0, 1] to an eased value."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Callable

_PI = 3.1415926545

EasingFunction = Callable[[float], float]


class Easing(IntEnum):
    """Identifiers of the available easing curves."""

    EASE_IN_SINE = 0
    EASE_OUT_SINE = 1
    EASE_IN_OUT_SINE = 2
    EASE_IN_QUAD = 3
    EASE_OUT_QUAD = 4
    EASE_IN_OUT_QUAD = 5
    EASE_IN_CUBIC = 6
    EASE_OUT_CUBIC = 7
    EASE_IN_OUT_CUBIC = 8
    EASE_IN_QUART = 9
    EASE_OUT_QUART = 10
    EASE_IN_OUT_QUART = 11
    EASE_IN_QUINT = 12
    EASE_OUT_QUINT = 13
    EASE_IN_OUT_QUINT = 14
    EASE_IN_EXPO = 15
    EASE_OUT_EXPO = 16
    EASE_IN_OUT_EXPO = 17
    EASE_IN_CIRC = 18
    EASE_OUT_CIRC = 19
    EASE_IN_OUT_CIRC = 20
    EASE_IN_BACK = 21
    EASE_OUT_BACK = 22
    EASE_IN_OUT_BACK = 23
    EASE_IN_ELASTIC = 24
    EASE_OUT_ELASTIC = 25
    EASE_IN_OUT_ELASTIC = 26
    EASE_IN_BOUNCE = 27
    EASE_OUT_BOUNCE = 28
    EASE_IN_OUT_BOUNCE = 29


def ease_in_sine(t: float) -> float:
    return math.sin(1.5707963 * t)


def ease_out_sine(t: float) -> float:
    return 1 + math.sin(1.5707963 * (t - 1))


def ease_in_out_sine(t: float) -> float:
    return 0.5 * (1 + math.sin(3.1415926 * (t - 0.5)))


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return t * (2 - t)


def ease_in_out_quad(t: float) -> float:
    return 2 * t * t if t < 0.5 else t * (4 - 2 * t) - 1


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    u = t - 1
    return 1 + u * u * u


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    u = t - 1
    return 1 + u * (2 * u) * (2 * u)


def ease_in_quart(t: float) -> float:
    t2 = t * t
    return t2 * t2


def ease_out_quart(t: float) -> float:
    u = (t - 1) * (t - 1)
    return 1 - u * u


def ease_in_out_quart(t: float) -> float:
    if t < 0.5:
        t2 = t * t
        return 8 * t2 * t2
    u = (t - 1) * (t - 1)
    return 1 - 8 * u * u


def ease_in_quint(t: float) -> float:
    t2 = t * t
    return t * t2 * t2


def ease_out_quint(t: float) -> float:
    u = t - 1
    u2 = u * u
    return 1 + u * u2 * u2


def ease_in_out_quint(t: float) -> float:
    if t < 0.5:
        t2 = t * t
        return 16 * t * t2 * t2
    u = t - 1
    u2 = u * u
    return 1 + 16 * u * u2 * u2


def ease_in_expo(t: float) -> float:
    return (2 ** (8 * t) - 1) / 255


def ease_out_expo(t: float) -> float:
    return 1 - 2 ** (-8 * t)


def ease_in_out_expo(t: float) -> float:
    if t < 0.5:
        return (2 ** (16 * t) - 1) / 510
    return 1 - 0.5 * 2 ** (-16 * (t - 0.5))


def ease_in_circ(t: float) -> float:
    return 1 - math.sqrt(1 - t)


def ease_out_circ(t: float) -> float:
    return math.sqrt(t)


def ease_in_out_circ(t: float) -> float:
    if t < 0.5:
        return (1 - math.sqrt(1 - 2 * t)) * 0.5
    return (1 + math.sqrt(2 * t - 1)) * 0.5


def ease_in_back(t: float) -> float:
    return t * t * (2.70158 * t - 1.70158)


def ease_out_back(t: float) -> float:
    u = t - 1
    return 1 + u * u * (2.70158 * u + 1.70158)


def ease_in_out_back(t: float) -> float:
    if t < 0.5:
        return t * t * (7 * t - 2.5) * 2
    u = t - 1
    return 1 + u * u * 2 * (7 * u + 2.5)


def ease_in_elastic(t: float) -> float:
    t2 = t * t
    return t2 * t2 * math.sin(t * _PI * 4.5)


def ease_out_elastic(t: float) -> float:
    t2 = (t - 1) * (t - 1)
    return 1 - t2 * t2 * math.cos(t * _PI * 4.5)


def ease_in_out_elastic(t: float) -> float:
    if t < 0.45:
        t2 = t * t
        return 8 * t2 * t2 * math.sin(t * _PI * 9)
    if t < 0.55:
        return 0.5 + 0.75 * math.sin(t * _PI * 4)
    t2 = (t - 1) * (t - 1)
    return 1 - 8 * t2 * t2 * math.sin(t * _PI * 9)


def ease_in_bounce(t: float) -> float:
    return 2 ** (6 * (t - 1)) * abs(math.sin(t * _PI * 3.5))


def ease_out_bounce(t: float) -> float:
    return 1 - 2 ** (-6 * t) * abs(math.cos(t * _PI * 3.5))


def ease_in_out_bounce(t: float) -> float:
    if t < 0.5:
        return 8 * 2 ** (8 * (t - 1)) * abs(math.sin(t * _PI * 7))
    return 1 - 8 * 2 ** (-8 * t) * abs(math.sin(t * _PI * 7))


_FUNCTIONS: dict[Easing, EasingFunction] = {
    Easing.EASE_IN_SINE: ease_in_sine,
    Easing.EASE_OUT_SINE: ease_out_sine,
    Easing.EASE_IN_OUT_SINE: ease_in_out_sine,
    Easing.EASE_IN_QUAD: ease_in_quad,
    Easing.EASE_OUT_QUAD: ease_out_quad,
    Easing.EASE_IN_OUT_QUAD: ease_in_out_quad,
    Easing.EASE_IN_CUBIC: ease_in_cubic,
    Easing.EASE_OUT_CUBIC: ease_out_cubic,
    Easing.EASE_IN_OUT_CUBIC: ease_in_out_cubic,
    Easing.EASE_IN_QUART: ease_in_quart,
    Easing.EASE_OUT_QUART: ease_out_quart,
    Easing.EASE_IN_OUT_QUART: ease_in_out_quart,
    Easing.EASE_IN_QUINT: ease_in_quint,
    Easing.EASE_OUT_QUINT: ease_out_quint,
    Easing.EASE_IN_OUT_QUINT: ease_in_out_quint,
    Easing.EASE_IN_EXPO: ease_in_expo,
    Easing.EASE_OUT_EXPO: ease_out_expo,
    Easing.EASE_IN_OUT_EXPO: ease_in_out_expo,
    Easing.EASE_IN_CIRC: ease_in_circ,
    Easing.EASE_OUT_CIRC: ease_out_circ,
    Easing.EASE_IN_OUT_CIRC: ease_in_out_circ,
    Easing.EASE_IN_BACK: ease_in_back,
    Easing.EASE_OUT_BACK: ease_out_back,
    Easing.EASE_IN_OUT_BACK: ease_in_out_back,
    Easing.EASE_IN_ELASTIC: ease_in_elastic,
    Easing.EASE_OUT_ELASTIC: ease_out_elastic,
    Easing.EASE_IN_OUT_ELASTIC: ease_in_out_elastic,
    Easing.EASE_IN_BOUNCE: ease_in_bounce,
    Easing.EASE_OUT_BOUNCE: ease_out_bounce,
    Easing.EASE_IN_OUT_BOUNCE: ease_in_out_bounce,
}


def get_easing_function(function: Easing | int) -> EasingFunction:
    """Return the curve for an easing identifier; raise ValueError if unknown."""
    try:
        key = Easing(function)
    except ValueError:
        raise ValueError(f"unknown easing function: {function!r}") from None
    return _FUNCTIONS[key]