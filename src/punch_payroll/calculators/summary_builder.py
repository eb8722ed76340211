"""Output record shaping for payroll summaries."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from punch_payroll.calculators.types import PayrollSummary


class SummaryBuilder:
    """Renders summaries into the string-valued output records.

    Rounding:
    - Internal compute keeps full Decimal precision
    - Output is quantized to 4 decimal places, half away from zero
    - Negative zero prints as 0.0000
    """

    PRECISION = Decimal("0.0001")

    @staticmethod
    def round_to_precision(amount: Decimal) -> Decimal:
        """Round amount to 4 decimal places."""
        rounded = amount.quantize(SummaryBuilder.PRECISION, rounding=ROUND_HALF_UP)
        if rounded.is_zero():
            return abs(rounded)
        return rounded

    @staticmethod
    def format_amount(amount: Decimal) -> str:
        """Format as a fixed-point string with exactly 4 fractional digits."""
        return format(SummaryBuilder.round_to_precision(amount), "f")

    @staticmethod
    def to_record(summary: PayrollSummary) -> dict[str, str]:
        """Build the output record for one employee."""
        fmt = SummaryBuilder.format_amount
        return {
            "employee": summary.employee,
            "regular": fmt(summary.breakdown.regular),
            "overtime": fmt(summary.breakdown.overtime),
            "doubletime": fmt(summary.breakdown.doubletime),
            "wageTotal": fmt(summary.wage_total),
            "benefitTotal": fmt(summary.benefit_total),
        }

    @staticmethod
    def format_results(
        summaries: Mapping[str, PayrollSummary],
    ) -> dict[str, dict[str, str]]:
        """Render an employee -> summary mapping, keeping its order."""
        return {name: SummaryBuilder.to_record(s) for name, s in summaries.items()}
