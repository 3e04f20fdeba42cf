"""Debt service calculations."""

import numpy_financial as npf

from ..models.inputs import DebtService, PaymentType
from ..models.projection import Phase
from .amounts import non_negative


def calculate_monthly_debt_service(debt: DebtService, include_debt_service: bool = True) -> float:
    """Calculate the monthly payment on the project's loan.

    - Interest-only: loan x annual rate / 12
    - Amortizing: level payment P x r(1+r)^n / ((1+r)^n - 1)
    - Amortizing at 0%: loan / term

    The loan amount and feature flag are checked before the term is read, so
    a zero loan with a zero term yields zero rather than a division error.

    Args:
        debt: Loan terms (interest_rate is an annual percent).
        include_debt_service: Whether debt service is part of the projection.

    Returns:
        Monthly debt service.

    Example:
        >>> calculate_monthly_debt_service(DebtService(
        ...     loan_amount=300_000,
        ...     interest_rate=6.0,
        ...     loan_term_months=360,
        ...     payment_type=PaymentType.AMORTIZING,
        ... ))
        1798.65  # Approximate
    """
    loan_amount = non_negative(debt.loan_amount)
    if not include_debt_service or loan_amount == 0:
        return 0.0

    monthly_rate = non_negative(debt.interest_rate) / 100 / 12

    if debt.payment_type == PaymentType.INTEREST_ONLY:
        return loan_amount * monthly_rate

    term_months = int(non_negative(debt.loan_term_months))
    if term_months == 0:
        return 0.0

    if monthly_rate == 0:
        return loan_amount / term_months

    # numpy_financial returns payments as negative cash flows
    return float(-npf.pmt(rate=monthly_rate, nper=term_months, pv=loan_amount, fv=0))


def debt_service_applies(phase: Phase, debt: DebtService) -> bool:
    """Check whether debt service is charged in a month of the given phase.

    Debt is always serviced after construction. During construction only
    interest-only debt is paid, as interest accrues on the draws.
    """
    if phase == Phase.POST_CONSTRUCTION:
        return True
    return debt.payment_type == PaymentType.INTEREST_ONLY
