from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from carbay.domain.financing import EmiEstimate, LoanRequest

HUNDRED = Decimal("100")
MONTHS_PER_YEAR = Decimal("12")


@dataclass(frozen=True, slots=True)
class CalculateEmi:
    """
    Estimate the monthly instalment (EMI) of a car loan with exact decimal arithmetic.

    Rounding policy:
    - All intermediate calculations use full precision Decimal
    - Monthly payment is rounded to a whole currency unit using ROUND_HALF_UP
    - Totals are computed from the rounded monthly payment
    """

    def execute(self, req: LoanRequest) -> EmiEstimate:
        req.validate()

        down_payment = req.price * req.down_payment_percent / HUNDRED
        principal = req.price - down_payment
        monthly_rate = req.annual_interest_rate / MONTHS_PER_YEAR / HUNDRED
        months = Decimal(req.tenure_months)

        # Standard amortized loan payment:
        # monthly_payment = P * r * (1+r)^n / ((1+r)^n - 1)
        # The formula divides by zero at r = 0, where the loan is plain P / n.
        if monthly_rate == 0:
            monthly_payment_precise = principal / months
        else:
            factor = (1 + monthly_rate) ** req.tenure_months
            monthly_payment_precise = principal * monthly_rate * factor / (factor - 1)

        monthly_payment = int(monthly_payment_precise.quantize(Decimal("1"), rounding=ROUND_HALF_UP))

        total_paid = monthly_payment * req.tenure_months

        return EmiEstimate(
            principal=principal,
            down_payment=down_payment,
            annual_interest_rate=req.annual_interest_rate,
            tenure_months=req.tenure_months,
            monthly_payment=monthly_payment,
            total_paid=total_paid,
            total_interest=Decimal(total_paid) - principal,
        )
