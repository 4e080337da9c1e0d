"""
Decimal Utilities
excellence/scoring/utils.py

Precision-safe threshold math. Float products such as 5 * 0.30 land on
1.4999999999999998, so the product is taken on Decimals built from the
string form of the percentile and rounded exactly once.
"""

from decimal import Decimal, ROUND_HALF_UP


def exact_product(group_size: int, percentile: float) -> Decimal:
    """group_size × percentile with no intermediate rounding."""
    return Decimal(group_size) * Decimal(str(percentile))


def raw_threshold(group_size: int, percentile: float) -> Decimal:
    """
    Unrounded cutoff, group_size × percentile, to 2 places for display.

    Examples:
        >>> raw_threshold(10, 0.3)
        Decimal('3.00')
    """
    return exact_product(group_size, percentile).quantize(
        Decimal("0.01"), rounding=ROUND_HALF_UP
    )


def threshold(group_size: int, percentile: float) -> int:
    """
    Rank cutoff for a group: round(group_size × percentile), half-up.

    A team satisfies a criterion when its rank is at or below this value.
    An empty group yields 0.

    Examples:
        >>> threshold(10, 0.3)
        3
        >>> threshold(5, 0.3)
        2
        >>> threshold(1000, 0.12345)
        123
        >>> threshold(0, 0.4)
        0
    """
    if group_size <= 0:
        return 0
    product = exact_product(group_size, percentile)
    return int(product.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
