# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Stored record models for the CondoFlow platform.

These describe records as they come back from the API/database. Input rules
(minimum lengths, NIF checksum) live on the request models; here fields are
typed but not re-validated.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import Field
from .base import BaseEntity, BaseSchema
from .enums import (
    AssemblyStatus,
    AssemblyType,
    ContactRole,
    DocumentCategory,
    FractionOccupation,
    FractionTypology,
    OccurrenceCategory,
    OccurrencePriority,
    OccurrenceStatus,
    PaymentMethod,
    PaymentStatus,
    ProjectStatus,
    RiskLevel,
    TransactionCategory,
    TransactionStatus,
    TransactionType,
    UserRole,
)
from .requests import AgendaItem, Decision, Minutes


class User(BaseEntity):
    """Back-office user."""

    email: str = Field(..., description="User email address")
    name: str = Field(..., description="User full name")
    role: UserRole = Field(default=UserRole.COLABORADOR, description="User role")


class Condominium(BaseEntity):
    """Managed building, with denormalized counters kept by the API."""

    name: str = Field(..., description="Condominium name")
    address: str = Field(..., description="Street address")
    postal_code: str = Field(..., description="Postal code")
    city: str = Field(..., description="City")
    nif: str = Field(..., description="Tax identification number")
    bank_account: str = Field(..., description="Bank account (IBAN)")
    balance: float = Field(default=0, description="Current balance in EUR")
    debt_total: float = Field(default=0, description="Sum of fraction debts in EUR")
    reserve_fund: float = Field(default=0, description="Reserve fund in EUR")
    risk_level: RiskLevel = Field(default=RiskLevel.LOW, description="Risk level")
    urgent_occurrences: int = Field(default=0, description="Open urgent occurrences")
    open_occurrences: int = Field(default=0, description="Open occurrences")
    fractions_count: int = Field(default=0, description="Number of fractions")
    next_assembly_date: Optional[datetime] = Field(None, description="Next scheduled assembly")


class Fraction(BaseEntity):
    """Unit of a condominium."""

    condominium_id: str = Field(..., description="Owning condominium")
    condominium_name: Optional[str] = Field(None, description="Condominium name (joined)")
    number: str = Field(..., description="Fraction number/letter")
    floor: str = Field(..., description="Floor")
    block: Optional[str] = Field(None, description="Block")
    staircase: Optional[str] = Field(None, description="Staircase")
    typology: FractionTypology = Field(default=FractionTypology.T2, description="Typology")
    permillage: float = Field(default=0, description="Permillage")
    monthly_quota: float = Field(default=0, description="Monthly quota in EUR")
    owner_name: str = Field(..., description="Owner name")
    owner_email: Optional[str] = Field(None, description="Owner email")
    owner_phone: Optional[str] = Field(None, description="Owner phone")
    tenant_name: Optional[str] = Field(None, description="Tenant name")
    tenant_email: Optional[str] = Field(None, description="Tenant email")
    tenant_phone: Optional[str] = Field(None, description="Tenant phone")
    occupation: FractionOccupation = Field(
        default=FractionOccupation.PROPRIETARIO, description="Occupation"
    )
    payment_status: PaymentStatus = Field(default=PaymentStatus.EM_DIA, description="Payment standing")
    debt_amount: float = Field(default=0, description="Outstanding debt in EUR")
    is_active: bool = Field(default=True, description="Whether the fraction is active")
    is_follow_up: bool = Field(default=False, description="Flagged for follow-up")


class OccurrenceComment(BaseEntity):
    """Comment on an occurrence."""

    occurrence_id: str = Field(..., description="Occurrence")
    text: str = Field(..., description="Comment text")
    author_id: str = Field(..., description="Author user ID")
    author_name: str = Field(..., description="Author display name")


class OccurrenceAuditLog(BaseEntity):
    """History entry for an occurrence (creation, update, status change, assignment)."""

    occurrence_id: str = Field(..., description="Occurrence")
    action: str = Field(..., description="CREATION, UPDATE, STATUS_CHANGE or ASSIGNMENT")
    author_id: str = Field(..., description="Author user ID")
    author_name: str = Field(..., description="Author display name")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Action details")


class Occurrence(BaseEntity):
    """Maintenance ticket."""

    condominium_id: str = Field(..., description="Condominium")
    fraction_id: Optional[str] = Field(None, description="Affected fraction")
    title: str = Field(..., description="Short title")
    description: str = Field(..., description="Description")
    category: OccurrenceCategory = Field(..., description="Category")
    priority: OccurrencePriority = Field(default=OccurrencePriority.NORMAL, description="Priority")
    status: OccurrenceStatus = Field(default=OccurrenceStatus.ABERTA, description="Workflow status")
    location: str = Field(default="", description="Location within the building")
    reported_by: str = Field(default="", description="Reporter")
    sla_deadline: Optional[datetime] = Field(None, description="SLA deadline")
    resolved_at: Optional[datetime] = Field(None, description="When it was resolved")
    assigned_supplier_id: Optional[str] = Field(None, description="Assigned supplier")
    notes: Optional[str] = Field(None, description="Internal notes")
    comments: List[OccurrenceComment] = Field(default_factory=list, description="Comments")


class Supplier(BaseEntity):
    """Service supplier."""

    name: str = Field(..., description="Supplier name")
    nif: str = Field(..., description="Tax identification number")
    email: Optional[str] = Field(None, description="Contact email")
    phone: Optional[str] = Field(None, description="Contact phone")
    address: Optional[str] = Field(None, description="Address")
    contact_person: Optional[str] = Field(None, description="Contact person")
    categories: str = Field(default="", description="Comma-separated service categories")
    notes: Optional[str] = Field(None, description="Notes")
    tags: Optional[str] = Field(None, description="Comma-separated tags")
    favorite: bool = Field(default=False, description="Marked as favorite")
    active: bool = Field(default=True, description="Whether the supplier is active")
    rating: Optional[float] = Field(None, ge=0, le=5, description="Average rating")


class Transaction(BaseEntity):
    """Income or expense entry."""

    condominium_id: str = Field(..., description="Condominium")
    condominium_name: Optional[str] = Field(None, description="Condominium name (joined)")
    fraction_id: Optional[str] = Field(None, description="Related fraction")
    fraction_number: Optional[str] = Field(None, description="Fraction number (joined)")
    supplier_id: Optional[str] = Field(None, description="Related supplier")
    supplier_name: Optional[str] = Field(None, description="Supplier name (joined)")
    type: TransactionType = Field(..., description="Income or expense")
    category: TransactionCategory = Field(..., description="Category")
    amount: float = Field(..., description="Amount in EUR")
    description: str = Field(..., description="Description")
    date: datetime = Field(..., description="Transaction date")
    payment_method: Optional[PaymentMethod] = Field(None, description="Payment method")
    reference: Optional[str] = Field(None, description="External reference")
    status: TransactionStatus = Field(default=TransactionStatus.NORMAL, description="Status")


class Project(BaseEntity):
    """Works project."""

    condominium_id: str = Field(..., description="Condominium")
    title: str = Field(..., description="Title")
    description: str = Field(..., description="Description")
    status: ProjectStatus = Field(default=ProjectStatus.PLANEAMENTO, description="Status")
    budget_estimate: float = Field(default=0, description="Estimated budget in EUR")
    start_date: Optional[datetime] = Field(None, description="Planned start")
    end_date: Optional[datetime] = Field(None, description="Planned end")
    supplier_id: Optional[str] = Field(None, description="Contracted supplier")
    notes: Optional[str] = Field(None, description="Notes")


class Assembly(BaseEntity):
    """General assembly of owners."""

    condominium_id: str = Field(..., description="Condominium")
    year: int = Field(..., description="Fiscal year")
    type: AssemblyType = Field(default=AssemblyType.AGO, description="AGO or AGE")
    status: AssemblyStatus = Field(default=AssemblyStatus.NAO_MARCADA, description="Status")
    date: Optional[datetime] = Field(None, description="Scheduled date")
    location: Optional[str] = Field(None, description="Venue")
    agenda_items: List[AgendaItem] = Field(default_factory=list, description="Agenda")
    decisions: List[Decision] = Field(default_factory=list, description="Decisions")
    minutes: Optional[Minutes] = Field(None, description="Minutes")


class Document(BaseEntity):
    """Uploaded document metadata."""

    condominium_id: str = Field(..., description="Condominium")
    category: DocumentCategory = Field(..., description="Category")
    title: str = Field(..., description="Title")
    description: Optional[str] = Field(None, description="Description")
    file_name: str = Field(..., description="Stored file name")
    tags: Optional[str] = Field(None, description="Comma-separated tags")


class Contact(BaseEntity):
    """Condominium contact."""

    condominium_id: str = Field(..., description="Condominium")
    name: str = Field(..., description="Name")
    role: ContactRole = Field(..., description="Role")
    email: Optional[str] = Field(None, description="Email")
    phone: Optional[str] = Field(None, description="Phone")
    description: Optional[str] = Field(None, description="Description")
    is_public: bool = Field(default=True, description="Visible to residents")


class UserContext(BaseSchema):
    """Authenticated user performing an operation, for audit trails."""

    user_id: str = Field(..., description="Authenticated user ID")
    email: Optional[str] = Field(None, description="User email")
    name: Optional[str] = Field(None, description="User display name")

    @property
    def display_name(self) -> str:
        """Name for audit entries, falling back to the email."""
        return self.name or self.email or self.user_id
