"""
Configuration for funcpatterns.
"""

from decimal import Decimal
from typing import Final

# --- Validation ---
VALIDATION_ERROR_SEPARATOR: Final[str] = "; "
VALIDATION_MIN_LENGTH: Final[int] = 3
VALIDATION_SAMPLES: Final[tuple[str, ...]] = ("", "ab", "abcd")

# --- Partial Application ---
SALES_TAX_RATE: Final[Decimal] = Decimal("0.08")
VAT_RATE: Final[Decimal] = Decimal("0.20")
SAMPLE_PRICE: Final[Decimal] = Decimal("100")

# --- Option / Railway ---
OPTION_SAMPLES: Final[tuple[str, ...]] = ("100", "abc", "250")
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
RAILWAY_START: Final[int] = 100
RAILWAY_FAILING_START: Final[int] = 10

# --- Sequences & Memoization ---
SEQUENCE_SAMPLE_SIZE: Final[int] = 10
MEMOIZED_FIBONACCI_LIMIT: Final[int] = 10

# --- Composition ---
COMPOSITION_SAMPLE: Final[str] = "functional programming"

# --- UI Configuration ---
RICH_TITLE_STYLE: Final[str] = "bold magenta"
LOG_FORMAT: Final[str] = "%(message)s"

# --- SSoT Enforcement ---
__all__ = [
    "COMPOSITION_SAMPLE",
    "INT32_MAX",
    "INT32_MIN",
    "LOG_FORMAT",
    "MEMOIZED_FIBONACCI_LIMIT",
    "OPTION_SAMPLES",
    "RAILWAY_FAILING_START",
    "RAILWAY_START",
    "RICH_TITLE_STYLE",
    "SALES_TAX_RATE",
    "SAMPLE_PRICE",
    "SEQUENCE_SAMPLE_SIZE",
    "VALIDATION_ERROR_SEPARATOR",
    "VALIDATION_MIN_LENGTH",
    "VALIDATION_SAMPLES",
    "VAT_RATE",
]
