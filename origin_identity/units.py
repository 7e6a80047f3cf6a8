"""Base-unit formatting for ERC-20 amounts."""


def format_units(value: int, decimals: int) -> str:
    """
    Format an integer amount of base units as a decimal string.

    Exact for any size: ``format_units(10**24, 18) == "1000000"`` and
    ``format_units(15 * 10**17, 18) == "1.5"``. Trailing zeros are dropped.
    """
    if decimals < 0:
        raise ValueError("decimals must be non-negative")
    value = int(value)
    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(value), 10 ** decimals)
    if decimals == 0 or fraction == 0:
        return f"{sign}{whole}"
    fraction_str = str(fraction).rjust(decimals, "0").rstrip("0")
    return f"{sign}{whole}.{fraction_str}"
