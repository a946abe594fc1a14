from pydantic import BaseModel, ConfigDict, Field


class EmiRequestDTO(BaseModel):
    """Request payload for an EMI estimate."""

    price: int = Field(
        description="Car price in whole currency units",
        examples=[3500000],
        gt=0,
    )
    down_payment_percent: str = Field(
        default="20",
        description="Down payment as a percentage of price",
        examples=["20"],
        pattern=r"^\d+(\.\d{1,2})?$",
    )
    tenure_months: int = Field(
        default=60,
        description="Loan tenure in months",
        examples=[60],
        ge=1,
    )
    annual_interest_rate: str = Field(
        default="9",
        description="Annual interest rate in percent",
        examples=["9"],
        pattern=r"^\d+(\.\d{1,2})?$",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "price": 3500000,
                "down_payment_percent": "20",
                "tenure_months": 60,
                "annual_interest_rate": "9",
            }
        }
    )


class EmiResponseDTO(BaseModel):
    """Response with the estimated instalment."""

    principal: str = Field(description="Financed amount as decimal string", examples=["2800000"])
    down_payment: str = Field(description="Down payment as decimal string", examples=["700000"])
    annual_interest_rate: str = Field(examples=["9"])
    tenure_months: int = Field(examples=[60])
    monthly_payment: int = Field(description="Rounded monthly instalment", examples=[58123])
    total_paid: int = Field(examples=[3487380])
    total_interest: str = Field(examples=["687380"])
