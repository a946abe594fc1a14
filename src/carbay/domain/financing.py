from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from carbay.domain.errors import ValidationError


class InvalidLoanInput(ValidationError):
    pass


DEFAULT_DOWN_PAYMENT_PERCENT = Decimal("20")
DEFAULT_TENURE_MONTHS = 60
DEFAULT_ANNUAL_INTEREST_RATE = Decimal("9")  # percent


@dataclass(frozen=True, slots=True)
class LoanRequest:
    price: Decimal
    down_payment_percent: Decimal = DEFAULT_DOWN_PAYMENT_PERCENT
    tenure_months: int = DEFAULT_TENURE_MONTHS
    annual_interest_rate: Decimal = DEFAULT_ANNUAL_INTEREST_RATE

    def validate(self) -> None:
        if self.price <= 0:
            raise InvalidLoanInput("price must be > 0")
        if self.down_payment_percent < 0:
            raise InvalidLoanInput("down_payment_percent must be >= 0")
        if self.down_payment_percent >= 100:
            raise InvalidLoanInput("down_payment_percent must be < 100")
        if self.tenure_months <= 0:
            raise InvalidLoanInput("tenure_months must be > 0")
        if self.annual_interest_rate < 0:
            raise InvalidLoanInput("annual_interest_rate must be >= 0")


@dataclass(frozen=True, slots=True)
class EmiEstimate:
    principal: Decimal
    down_payment: Decimal
    annual_interest_rate: Decimal
    tenure_months: int
    monthly_payment: int
    total_paid: int
    total_interest: Decimal
