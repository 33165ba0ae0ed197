"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class DecisionRequest(BaseModel):
    """Request body for POST /loan/decision

    Fields are optional here; missing values are rejected by the decision engine
    so the caller gets the same error message as for out-of-range values.
    """

    model_config = ConfigDict(populate_by_name=True)

    personal_code: Optional[str] = Field(None, alias="personalCode", description="Estonian personal ID code")
    loan_amount: Optional[int] = Field(None, alias="loanAmount", description="Requested amount in euros")
    loan_period: Optional[int] = Field(None, alias="loanPeriod", description="Requested period in months")


class DecisionResponse(BaseModel):
    """Response for POST /loan/decision, success or failure"""

    model_config = ConfigDict(populate_by_name=True)

    loan_amount: Optional[int] = Field(None, alias="loanAmount")
    loan_period: Optional[int] = Field(None, alias="loanPeriod")
    error_message: Optional[str] = Field(None, alias="errorMessage")
