from core.exceptions import InvalidBaseUnitsException


def base_units_to_decimal(value: str, precision: int) -> str:
    """
    Convert a base-unit integer string into a decimal display string.

    The value is left-padded with zeros to ``precision`` digits and a
    decimal point is placed so that ``precision - 1`` digits follow it.
    No rounding is performed.

    Parameters
    ----------
    value : str
        Non-negative integer as a decimal digit string
    precision : int
        Number of digits the decimal point is placed against

    Returns
    -------
    str
        Decimal string, e.g. ``"1230000000000000000"`` with precision 19
        becomes ``"1.230000000000000000"``

    Raises
    ------
    InvalidBaseUnitsException
        If value is empty or contains anything but ASCII digits
    ValueError
        If precision is lower than 1
    """
    if precision < 1:
        raise ValueError(f"Precision must be positive, got {precision}")
    if not value or not (value.isascii() and value.isdigit()):
        raise InvalidBaseUnitsException(f"Invalid base units value '{value}'")

    if len(value) < precision:
        value = value.zfill(precision)

    split_at = len(value) - precision + 1
    return f"{value[:split_at]}.{value[split_at:]}"
