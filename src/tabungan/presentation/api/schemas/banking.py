"""Online-banking schemas.

Amounts and balances are Decimal with at most two fractional digits.
They are serialised as JSON strings so no precision is lost.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class BankAccountOpenRequest(BaseModel):
    """Request schema for opening a bank account."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    password_confirm: str
    balance: Decimal = Field(
        default=Decimal("0"),
        max_digits=18,
        decimal_places=2,
        description="Opening balance",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Anna",
                "email": "anna@example.com",
                "password": "securepassword123",
                "password_confirm": "securepassword123",
                "balance": "100.00",
            },
        },
    )


class BankAccountOpenResponse(BaseModel):
    message: str
    name: str
    email: str
    balance: Decimal


class BankCredentialsRequest(BaseModel):
    """Account email and password, re-verified on every operation."""

    email: EmailStr
    password: str


class BalanceAdjustRequest(BankCredentialsRequest):
    """Deposit (positive amount) or withdrawal (negative amount)."""

    amount: Decimal = Field(..., max_digits=18, decimal_places=2)


class BalanceResponse(BaseModel):
    balance: Decimal
