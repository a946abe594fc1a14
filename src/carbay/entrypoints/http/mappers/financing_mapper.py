from __future__ import annotations

from decimal import Decimal, InvalidOperation

from carbay.domain.errors import ValidationError
from carbay.domain.financing import EmiEstimate, LoanRequest
from carbay.entrypoints.http.dtos.financing import EmiRequestDTO, EmiResponseDTO


class FinancingMapper:
    """Maps between REST DTOs and domain models for loan estimates."""

    @staticmethod
    def to_domain_request(dto: EmiRequestDTO) -> LoanRequest:
        """
        Converts request DTO to domain LoanRequest.

        Handles string → Decimal conversion at the boundary.

        Raises:
            ValidationError: If percentage strings are not valid decimals
        """
        errors = []
        values: dict[str, Decimal] = {}

        for field in ("down_payment_percent", "annual_interest_rate"):
            raw = getattr(dto, field)
            try:
                values[field] = Decimal(raw)
            except (InvalidOperation, ValueError):
                errors.append(
                    {
                        "field": field,
                        "message": f"Must be a valid decimal: {raw}",
                        "code": "INVALID_DECIMAL",
                    }
                )

        if errors:
            raise ValidationError(errors=errors)

        return LoanRequest(
            price=Decimal(dto.price),
            down_payment_percent=values["down_payment_percent"],
            tenure_months=dto.tenure_months,
            annual_interest_rate=values["annual_interest_rate"],
        )

    @staticmethod
    def to_response(estimate: EmiEstimate) -> EmiResponseDTO:
        """Decimal → string conversion at the boundary."""
        return EmiResponseDTO(
            principal=str(estimate.principal),
            down_payment=str(estimate.down_payment),
            annual_interest_rate=str(estimate.annual_interest_rate),
            tenure_months=estimate.tenure_months,
            monthly_payment=estimate.monthly_payment,
            total_paid=estimate.total_paid,
            total_interest=str(estimate.total_interest),
        )
