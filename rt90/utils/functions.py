"""Module for miscellaneous multi-use functions"""

__all__ = ['dms_to_decimal', 'round_half_up']


def dms_to_decimal(degrees: float, minutes: float = 0., seconds: float = 0.) -> float:
    """
    Converts an angle given as degrees, minutes and seconds to decimal degrees.

    The sign of the result follows the sign of `degrees`; minutes and seconds
    are always treated as magnitudes.

    Args:
        degrees:
            Whole (or fractional) degrees
        minutes:
            Arc minutes
        seconds:
            Arc seconds

    Returns:
        float
    """
    mult = -1 if degrees < 0 else 1
    return mult * (abs(degrees) + abs(minutes) / 60 + abs(seconds) / 3600)


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)
