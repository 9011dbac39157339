"""
Partial application: fix the tax rate to get a single-argument calculator.
"""

from collections.abc import Callable
from decimal import Decimal

from rich.console import Console

from ..app import config
from ..core.pipeline import partial
from ._console import resolve_console


def apply_tax(tax_rate: Decimal, amount: Decimal) -> Decimal:
    return amount * (1 + tax_rate)


def create_tax_calculator(tax_rate: Decimal) -> Callable[[Decimal], Decimal]:
    """Binds `tax_rate`, returning a function of the amount alone."""
    return partial(apply_tax, tax_rate)


def run(console: Console | None = None) -> None:
    console = resolve_console(console)
    calculate_sales_tax = create_tax_calculator(config.SALES_TAX_RATE)
    calculate_vat = create_tax_calculator(config.VAT_RATE)

    price = config.SAMPLE_PRICE
    console.print(f"Sales tax total: {calculate_sales_tax(price):.2f}")
    console.print(f"VAT total: {calculate_vat(price):.2f}")


__all__ = ["apply_tax", "create_tax_calculator", "run"]
