"""Online-banking router.

Every endpoint re-verifies the bank account's own email and password in
the request body, on top of the caller's session token.
"""

from uuid import UUID

from fastapi import APIRouter, status

from tabungan.domain.user import PasswordConfirmationMismatchError
from tabungan.presentation.api.dependencies import DBSession, Ledger
from tabungan.presentation.api.schemas.banking import (
    BalanceAdjustRequest,
    BalanceResponse,
    BankAccountOpenRequest,
    BankAccountOpenResponse,
    BankCredentialsRequest,
)
from tabungan.presentation.api.schemas.common import ErrorResponse, MessageResponse

router = APIRouter()

NOT_FOUND_RESPONSE = {"model": ErrorResponse, "description": "Unknown account"}
WRONG_PASSWORD_RESPONSE = {"model": ErrorResponse, "description": "Invalid password"}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Open bank account",
    responses={
        400: {"model": ErrorResponse, "description": "Passwords differ"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def open_account(
    request: BankAccountOpenRequest,
    ledger: Ledger,
    session: DBSession,
) -> BankAccountOpenResponse:
    if request.password != request.password_confirm:
        raise PasswordConfirmationMismatchError

    try:
        account = await ledger.open_account(
            name=request.name,
            email=request.email,
            password=request.password,
            balance=request.balance,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return BankAccountOpenResponse(
        message="Bank account created",
        name=account.name,
        email=account.email,
        balance=account.balance,
    )


@router.post(
    "/balance",
    summary="Read balance",
    responses={
        401: {"model": ErrorResponse, "description": "Invalid email or password"},
    },
)
async def read_balance(
    request: BankCredentialsRequest,
    ledger: Ledger,
) -> BalanceResponse:
    """Credentials travel in the body, hence POST."""
    balance = await ledger.read_balance(
        email=request.email,
        password=request.password,
    )
    return BalanceResponse(balance=balance)


@router.put(
    "/{account_id}/balance",
    summary="Deposit or withdraw",
    responses={401: WRONG_PASSWORD_RESPONSE, 422: NOT_FOUND_RESPONSE},
)
async def adjust_balance(
    account_id: UUID,
    request: BalanceAdjustRequest,
    ledger: Ledger,
    session: DBSession,
) -> BalanceResponse:
    try:
        balance = await ledger.adjust_balance(
            account_id=account_id,
            email=request.email,
            password=request.password,
            amount=request.amount,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return BalanceResponse(balance=balance)


@router.delete(
    "/{account_id}",
    summary="Close bank account",
    responses={
        401: WRONG_PASSWORD_RESPONSE,
        403: {"model": ErrorResponse, "description": "Email does not match"},
        422: NOT_FOUND_RESPONSE,
    },
)
async def close_account(
    account_id: UUID,
    request: BankCredentialsRequest,
    ledger: Ledger,
    session: DBSession,
) -> MessageResponse:
    try:
        await ledger.close_account(
            account_id=account_id,
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return MessageResponse(message="Bank account deleted")
