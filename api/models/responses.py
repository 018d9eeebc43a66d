# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Response models shared by the API and its clients.
"""

from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, TypeVar
from pydantic import Field
from .base import BaseSchema
from .entities import Fraction, Transaction, User
from .enums import PriorityType, RiskLevel, Urgency

T = TypeVar('T')


class PaginatedResponse(BaseSchema, Generic[T]):
    """One page of a listing."""

    data: List[T] = Field(default_factory=list, description="Items on this page")
    total: int = Field(..., ge=0, description="Total number of matching items")
    page: int = Field(..., ge=1, description="Current page number")
    page_size: int = Field(..., ge=1, description="Items per page")
    total_pages: int = Field(..., ge=0, description="Total number of pages")


class FieldError(BaseSchema):
    """Single field validation failure."""

    field: str = Field(..., description="Dotted path of the failing field (wire names)")
    message: str = Field(..., description="Human-readable message")
    type: str = Field(..., description="Machine-readable error type")
    input: Optional[Any] = Field(None, description="Rejected input value")
    context: Optional[Dict[str, Any]] = Field(None, description="Extra error context")


class ErrorResponse(BaseSchema):
    """Error response model following RFC 7807."""

    type: str = Field(..., description="Error type URI")
    title: str = Field(..., description="Error title")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Error detail")
    instance: str = Field(..., description="Request instance")
    errors: Optional[List[FieldError]] = Field(None, description="Validation errors")


class ValidationErrorResponse(ErrorResponse):
    """Validation error response with field details."""

    errors: List[FieldError] = Field(..., description="Field validation errors")


class SuccessResponse(BaseSchema):
    """Generic success response."""

    message: str = Field(..., description="Success message")
    data: Optional[Dict[str, Any]] = Field(None, description="Additional data")


class LoginResponse(BaseSchema):
    """Authentication response."""

    token: str = Field(..., description="Bearer token")
    user: User = Field(..., description="Authenticated user")


class TransactionSummary(BaseSchema):
    """Revenue/expense totals over a set of transactions."""

    total_revenue: float = Field(default=0, description="Sum of income")
    total_expenses: float = Field(default=0, description="Sum of expenses")
    count: int = Field(default=0, description="Transactions considered")
    balance: float = Field(default=0, description="Revenue minus expenses")


class OccurrenceStats(BaseSchema):
    """Occurrence counters for the dashboard."""

    open: int = Field(default=0, description="Occurrences in ABERTA")
    urgent: int = Field(default=0, description="Urgent and not closed")
    execution: int = Field(default=0, description="Occurrences in EM_EXECUCAO")
    resolved_recent: int = Field(default=0, description="Resolved in the last 7 days")
    overdue: int = Field(default=0, description="Not closed and past SLA deadline")


class PaymentRegistration(BaseSchema):
    """Result of registering a quota payment."""

    transaction: Transaction = Field(..., description="Income transaction created")
    fraction: Fraction = Field(..., description="Fraction with updated debt and status")


class DashboardStats(BaseSchema):
    """Portfolio-wide totals for the dashboard header."""

    global_balance: float = Field(default=0, description="Sum of condominium balances in EUR")
    total_debt: float = Field(default=0, description="Sum of fraction debts in EUR")
    open_occurrences: int = Field(default=0, description="Occurrences not resolved or archived")
    urgent_occurrences: int = Field(default=0, description="Open urgent occurrences")
    pending_assemblies: int = Field(default=0, description="Assemblies not yet held")
    condominiums_at_risk: int = Field(default=0, description="Condominiums with HIGH or CRITICAL risk")


class PriorityItem(BaseSchema):
    """Something the manager should act on soon."""

    id: str = Field(..., description="ID of the underlying record")
    type: PriorityType = Field(..., description="sla, payment or assembly")
    title: str = Field(..., description="Short title")
    description: str = Field(..., description="Details")
    due_date: Optional[datetime] = Field(None, description="Deadline, when there is one")
    urgency: Urgency = Field(..., description="high, medium or low")
    condominium_id: str = Field(..., description="Condominium")
    condominium_name: Optional[str] = Field(None, description="Condominium name")


class AtRiskCondominium(BaseSchema):
    """Condominium flagged on the dashboard risk list."""

    id: str = Field(..., description="Condominium ID")
    name: str = Field(..., description="Condominium name")
    risk_level: RiskLevel = Field(..., description="Risk level")
    debt_total: float = Field(default=0, description="Sum of fraction debts in EUR")
    urgent_occurrences: int = Field(default=0, description="Open urgent occurrences")
    open_occurrences: int = Field(default=0, description="Open occurrences")
    last_payment_date: Optional[datetime] = Field(None, description="Date of the latest income")
