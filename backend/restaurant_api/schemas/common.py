"""
Restaurant API — Shared Schema Types
=====================================

What:  Field types and response models used by more than one entity.
Who:   Entity schema modules (Money, PartialUpdateInput), main.py and the
       routes (ErrorResponse, HealthResponse, RpcResponse).

Money:
    Prices and totals are JSON numbers on the wire and NUMERIC(10,2) in the
    database. Only values that survive number → decimal text → number
    unchanged are accepted: strictly positive, finite, at most two decimal
    places, and no larger than 99,999,999.99.
"""

from decimal import Decimal
from typing import Any, ClassVar, Dict, Optional, Tuple

from pydantic import AfterValidator, BaseModel, Field, model_validator
from typing_extensions import Annotated


MONEY_MAX = Decimal("99999999.99")


def _check_money(value: float) -> float:
    as_decimal = Decimal(str(value))
    if as_decimal.as_tuple().exponent < -2:
        raise ValueError("must have at most two decimal places")
    if as_decimal > MONEY_MAX:
        raise ValueError(f"must not exceed {MONEY_MAX}")
    return value


Money = Annotated[
    float,
    Field(gt=0, allow_inf_nan=False),
    AfterValidator(_check_money),
]

NonEmptyStr = Annotated[str, Field(min_length=1)]

# Primary keys are 32-bit INTEGER columns
ENTITY_ID_MAX = 2_147_483_647

EntityId = Annotated[int, Field(ge=1, le=ENTITY_ID_MAX)]


class PartialUpdateInput(BaseModel):
    """
    Base for update inputs where only the fields sent are changed.

    Absent fields are left alone; `null` is accepted only for columns that
    are nullable in the database. Subclasses list the rest in NON_NULLABLE.
    """

    NON_NULLABLE: ClassVar[Tuple[str, ...]] = ()

    id: EntityId

    @model_validator(mode="after")
    def _reject_null_for_required_columns(self) -> "PartialUpdateInput":
        for name in self.NON_NULLABLE:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"'{name}' cannot be null")
        return self

    def changes(self) -> Dict[str, Any]:
        """Fields the caller actually sent, excluding the id."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name != "id"
        }


# ══════════════════════════════════════════════════════════════════════════
# Response envelopes
# ══════════════════════════════════════════════════════════════════════════


class RpcResult(BaseModel):
    data: Any = Field(default=None, description="Procedure return value; null when not found")


class RpcResponse(BaseModel):
    """
    Success envelope for every procedure call.

    Example:
        {"result": {"data": {"id": 1, "name": "Soup", "price": 9.5, ...}}}
    """
    result: RpcResult


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error")
        message: Human-readable description for display to users
        details: Optional extra context (validation errors, missing ids)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
