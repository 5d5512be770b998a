"""Module for miscellaneous multi-use functions"""

__all__ = ['format_number', 'round_to_accuracy']

import math


def round_to_accuracy(value: float, accuracy: float) -> float:
    """
    Rounds a value to the nearest multiple of accuracy, where a value exactly
    between two multiples is rounded to the higher one.

    Args:
        value:
            The float value to be rounded

        accuracy:
            The step to round to, e.g. 0.001 keeps millimeters out of meters.
            A zero, negative or non-finite step returns the value unchanged.

    Returns:
        float
    """
    if not math.isfinite(accuracy) or accuracy <= 0:
        return value

    return float(math.floor(value / accuracy + 0.5) * accuracy)


def format_number(value: float) -> str:
    """
    Writes a number in its shortest round-trip form, dropping the fractional
    part of integral values (1000.0 -> '1000', -0.0 -> '0').

    Args:
        value:
            The number to be written

    Returns:
        str
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))

    return repr(value)
