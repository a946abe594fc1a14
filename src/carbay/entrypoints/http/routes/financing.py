from fastapi import APIRouter, Depends

from carbay.entrypoints.http.dependencies import get_calculate_emi_use_case
from carbay.entrypoints.http.dtos.financing import EmiRequestDTO, EmiResponseDTO
from carbay.entrypoints.http.error_responses import ERROR_RESPONSES
from carbay.entrypoints.http.mappers.financing_mapper import FinancingMapper
from carbay.use_cases.calculate_emi import CalculateEmi


router = APIRouter(tags=["Financing"])


@router.post(
    "/financing/emi",
    response_model=EmiResponseDTO,
    summary="Estimate monthly EMI",
    description="""
    Estimate the monthly instalment of a car loan.

    ## Calculation
    - Principal = price × (1 − down_payment_percent / 100)
    - r = annual_interest_rate / 12 / 100, n = tenure_months
    - EMI = P·r·(1+r)^n / ((1+r)^n − 1), rounded to a whole unit
    - At 0% interest, EMI = P / n

    ## Example
    ```
    POST /v1/financing/emi
    {"price": 3500000, "down_payment_percent": "20", "tenure_months": 60, "annual_interest_rate": "9"}
    ```
    """,
    responses={422: ERROR_RESPONSES[422]},
)
def estimate_emi(
    payload: EmiRequestDTO,
    use_case: CalculateEmi = Depends(get_calculate_emi_use_case),
) -> EmiResponseDTO:
    """Parse → execute → map → return."""
    request = FinancingMapper.to_domain_request(payload)
    estimate = use_case.execute(request)
    return FinancingMapper.to_response(estimate)
