"""Evaluation endpoints for deciding credit card applications."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from credit_cards.deps import get_evaluator
from credit_cards.models.schemas.application import (
    CreditCardApplicationCreate,
    EvaluationResponse,
)
from credit_cards.services.evaluator import CreditCardApplicationEvaluator

logger = logging.getLogger(__name__)

router = APIRouter()


def _run_evaluation(
    application_data: CreditCardApplicationCreate,
    evaluator: CreditCardApplicationEvaluator,
    use_out: bool,
) -> EvaluationResponse:
    try:
        outcome = evaluator.evaluate_with_reason(
            application_data.to_domain(), use_out=use_out
        )
        return EvaluationResponse(
            decision=outcome.decision,
            reason=outcome.reason,
            validation_mode=outcome.validation_mode,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error evaluating application: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to evaluate application: {str(e)}",
        )


@router.post(
    "",
    response_model=EvaluationResponse,
    status_code=status.HTTP_200_OK,
    summary="Evaluate a credit card application",
    description="Decide an application using income, age and frequent flyer validation",
)
async def evaluate_application(
    application_data: CreditCardApplicationCreate,
    evaluator: Annotated[CreditCardApplicationEvaluator, Depends(get_evaluator)],
) -> EvaluationResponse:
    """
    Evaluate a credit card application.

    Returns one of:
    - AutoAccepted: income at or above the auto-accept threshold
    - AutoDeclined: validated applicant with income below the decline threshold
    - ReferredToHuman: anything the rules cannot decide automatically
    """
    return _run_evaluation(application_data, evaluator, use_out=False)


@router.post(
    "/using-out",
    response_model=EvaluationResponse,
    status_code=status.HTTP_200_OK,
    summary="Evaluate using the output-holder validity check",
    description="Same decision table, with validity read from the validator's output holder",
)
async def evaluate_application_using_out(
    application_data: CreditCardApplicationCreate,
    evaluator: Annotated[CreditCardApplicationEvaluator, Depends(get_evaluator)],
) -> EvaluationResponse:
    """Evaluate a credit card application through is_valid_out()."""
    return _run_evaluation(application_data, evaluator, use_out=True)
