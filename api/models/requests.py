# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Request models for CondoFlow records.

Create models carry the required fields of each record; update models make
every field optional but keep the same per-field rules. Filter models extend
PaginationParams with the query parameters each listing accepts.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import Field, field_validator
from .base import BaseSchema
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
    SortOrder,
    TransactionCategory,
    TransactionStatus,
    TransactionType,
)
from .fields import Email, Nif, PostalCode, QueryFlag, UuidStr


class PaginationParams(BaseSchema):
    """Pagination, sorting and free-text search parameters."""

    page: int = Field(default=1, ge=1, description="Page number")
    page_size: int = Field(default=20, ge=1, le=100, description="Items per page")
    sort_by: Optional[str] = Field(None, description="Sort field")
    sort_order: Optional[SortOrder] = Field(None, description="Sort order")
    search: Optional[str] = Field(None, description="Free-text search")


class LoginRequest(BaseSchema):
    """Request model for back-office authentication."""

    email: Email = Field(..., description="User email address")
    password: str = Field(..., min_length=6, description="User password")


# Condominiums

class CreateCondominiumRequest(BaseSchema):
    """Request model for creating a condominium."""

    name: str = Field(..., min_length=3, description="Condominium name")
    address: str = Field(..., min_length=5, description="Street address")
    postal_code: PostalCode = Field(..., description="Postal code (1234-567)")
    city: str = Field(..., min_length=2, description="City")
    nif: Nif = Field(..., description="Tax identification number")
    bank_account: str = Field(..., min_length=1, description="Bank account (IBAN)")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate condominium name."""
        if not v.strip():
            raise ValueError('Condominium name cannot be empty')
        return v.strip()


class UpdateCondominiumRequest(BaseSchema):
    """Request model for updating a condominium."""

    name: Optional[str] = Field(None, min_length=3, description="Condominium name")
    address: Optional[str] = Field(None, min_length=5, description="Street address")
    postal_code: Optional[PostalCode] = Field(None, description="Postal code (1234-567)")
    city: Optional[str] = Field(None, min_length=2, description="City")
    nif: Optional[Nif] = Field(None, description="Tax identification number")
    bank_account: Optional[str] = Field(None, min_length=1, description="Bank account (IBAN)")


# Fractions

class CreateFractionRequest(BaseSchema):
    """Request model for creating a fraction."""

    condominium_id: UuidStr = Field(..., description="Owning condominium")
    number: str = Field(..., min_length=1, description="Fraction number/letter")
    floor: str = Field(..., min_length=1, description="Floor")
    block: Optional[str] = Field(None, description="Block")
    staircase: Optional[str] = Field(None, description="Staircase")
    typology: FractionTypology = Field(default=FractionTypology.T2, description="Typology")
    permillage: float = Field(..., ge=0, le=1000, description="Share of the building in permille")
    monthly_quota: float = Field(..., ge=0, description="Monthly quota in EUR")
    owner_name: str = Field(..., min_length=3, description="Owner name")
    owner_email: Optional[Email] = Field(None, description="Owner email")
    owner_phone: Optional[str] = Field(None, description="Owner phone")
    tenant_name: Optional[str] = Field(None, description="Tenant name")
    tenant_email: Optional[Email] = Field(None, description="Tenant email")
    tenant_phone: Optional[str] = Field(None, description="Tenant phone")
    occupation: FractionOccupation = Field(
        default=FractionOccupation.PROPRIETARIO, description="Occupation"
    )
    is_active: bool = Field(default=True, description="Whether the fraction is active")
    is_follow_up: bool = Field(default=False, description="Flagged for follow-up")


class UpdateFractionRequest(BaseSchema):
    """Request model for updating a fraction."""

    condominium_id: Optional[UuidStr] = Field(None, description="Owning condominium")
    number: Optional[str] = Field(None, min_length=1, description="Fraction number/letter")
    floor: Optional[str] = Field(None, min_length=1, description="Floor")
    block: Optional[str] = Field(None, description="Block")
    staircase: Optional[str] = Field(None, description="Staircase")
    typology: Optional[FractionTypology] = Field(None, description="Typology")
    permillage: Optional[float] = Field(None, ge=0, le=1000, description="Permillage")
    monthly_quota: Optional[float] = Field(None, ge=0, description="Monthly quota in EUR")
    owner_name: Optional[str] = Field(None, min_length=3, description="Owner name")
    owner_email: Optional[Email] = Field(None, description="Owner email")
    owner_phone: Optional[str] = Field(None, description="Owner phone")
    tenant_name: Optional[str] = Field(None, description="Tenant name")
    tenant_email: Optional[Email] = Field(None, description="Tenant email")
    tenant_phone: Optional[str] = Field(None, description="Tenant phone")
    occupation: Optional[FractionOccupation] = Field(None, description="Occupation")
    is_active: Optional[bool] = Field(None, description="Whether the fraction is active")
    is_follow_up: Optional[bool] = Field(None, description="Flagged for follow-up")
    payment_status: Optional[PaymentStatus] = Field(None, description="Payment standing")
    debt_amount: Optional[float] = Field(None, ge=0, description="Outstanding debt in EUR")


class FractionFilters(PaginationParams):
    """Filters for fraction listings."""

    condominium_id: Optional[UuidStr] = Field(None, description="Filter by condominium")
    payment_status: Optional[str] = Field(None, description="Filter by payment status")
    typology: Optional[str] = Field(None, description="Filter by typology")
    occupation: Optional[str] = Field(None, description="Filter by occupation")
    is_active: Optional[bool] = Field(None, description="Filter by active flag")
    is_follow_up: Optional[bool] = Field(None, description="Filter by follow-up flag")
    min_debt: Optional[float] = Field(None, description="Minimum debt amount")


class RegisterPaymentRequest(BaseSchema):
    """Request model for registering a quota payment on a fraction."""

    amount: float = Field(..., gt=0, description="Amount paid in EUR")
    date: Optional[datetime] = Field(None, description="Payment date (defaults to now)")
    method: Optional[PaymentMethod] = Field(None, description="Payment method")
    description: Optional[str] = Field(None, description="Transaction description")
    reference: Optional[str] = Field(None, description="Payment reference")


# Occurrences

class CreateOccurrenceRequest(BaseSchema):
    """Request model for reporting an occurrence."""

    condominium_id: UuidStr = Field(..., description="Condominium")
    fraction_id: Optional[UuidStr] = Field(None, description="Affected fraction")
    title: str = Field(..., min_length=5, description="Short title")
    description: str = Field(..., min_length=10, description="Description")
    category: OccurrenceCategory = Field(..., description="Category")
    priority: OccurrencePriority = Field(..., description="Priority")
    location: str = Field(..., min_length=1, description="Location within the building")
    reported_by: str = Field(..., min_length=1, description="Reporter")
    sla_deadline: Optional[datetime] = Field(None, description="SLA deadline")
    assigned_supplier_id: Optional[UuidStr] = Field(None, description="Assigned supplier")
    notes: Optional[str] = Field(None, description="Internal notes")


class UpdateOccurrenceRequest(BaseSchema):
    """Request model for updating an occurrence."""

    condominium_id: Optional[UuidStr] = Field(None, description="Condominium")
    fraction_id: Optional[UuidStr] = Field(None, description="Affected fraction")
    title: Optional[str] = Field(None, min_length=5, description="Short title")
    description: Optional[str] = Field(None, min_length=10, description="Description")
    category: Optional[OccurrenceCategory] = Field(None, description="Category")
    priority: Optional[OccurrencePriority] = Field(None, description="Priority")
    location: Optional[str] = Field(None, min_length=1, description="Location")
    reported_by: Optional[str] = Field(None, min_length=1, description="Reporter")
    sla_deadline: Optional[datetime] = Field(None, description="SLA deadline")
    assigned_supplier_id: Optional[UuidStr] = Field(None, description="Assigned supplier")
    notes: Optional[str] = Field(None, description="Internal notes")
    status: Optional[OccurrenceStatus] = Field(None, description="Workflow status")


class OccurrenceFilters(PaginationParams):
    """Filters for occurrence listings."""

    condominium_id: Optional[UuidStr] = Field(None, description="Filter by condominium")
    fraction_id: Optional[UuidStr] = Field(None, description="Filter by fraction")
    supplier_id: Optional[UuidStr] = Field(None, description="Filter by assigned supplier")
    status: Optional[str] = Field(None, description="Filter by status")
    priority: Optional[str] = Field(None, description="Filter by priority")
    category: Optional[str] = Field(None, description="Filter by category")
    date_from: Optional[datetime] = Field(None, alias="from", description="Created on or after")
    date_to: Optional[datetime] = Field(None, alias="to", description="Created on or before")
    overdue: QueryFlag = Field(None, description="Only open occurrences past their SLA")


class OccurrenceCommentRequest(BaseSchema):
    """Request model for commenting on an occurrence."""

    text: str = Field(..., min_length=1, description="Comment text")


class OccurrenceAssignmentRequest(BaseSchema):
    """Request model for assigning (or unassigning) a supplier."""

    supplier_id: Optional[UuidStr] = Field(..., description="Supplier, or null to unassign")


class OccurrenceStatusRequest(BaseSchema):
    """Request model for an occurrence status change."""

    status: OccurrenceStatus = Field(..., description="New status")
    notes: Optional[str] = Field(None, description="Reason for the change")


# Transactions

class CreateTransactionRequest(BaseSchema):
    """Request model for recording an income or expense."""

    condominium_id: UuidStr = Field(..., description="Condominium")
    fraction_id: Optional[UuidStr] = Field(None, description="Related fraction")
    supplier_id: Optional[UuidStr] = Field(None, description="Related supplier")
    type: TransactionType = Field(..., description="Income or expense")
    category: TransactionCategory = Field(..., description="Category")
    amount: float = Field(..., gt=0, description="Amount in EUR")
    description: str = Field(..., min_length=3, description="Description")
    date: datetime = Field(..., description="Transaction date")
    payment_method: Optional[PaymentMethod] = Field(None, description="Payment method")
    reference: Optional[str] = Field(None, description="External reference")
    status: TransactionStatus = Field(default=TransactionStatus.NORMAL, description="Status")


class TransactionFilters(PaginationParams):
    """Filters for transaction listings."""

    condominium_id: Optional[UuidStr] = Field(None, description="Filter by condominium")
    fraction_id: Optional[UuidStr] = Field(None, description="Filter by fraction")
    supplier_id: Optional[UuidStr] = Field(None, description="Filter by supplier")
    type: Optional[TransactionType] = Field(None, description="Filter by type")
    category: Optional[str] = Field(None, description="Filter by category")
    status: Optional[str] = Field(None, description="Filter by status")
    payment_method: Optional[str] = Field(None, description="Filter by payment method")
    date_from: Optional[datetime] = Field(None, alias="from", description="On or after")
    date_to: Optional[datetime] = Field(None, alias="to", description="On or before")


# Suppliers

class CreateSupplierRequest(BaseSchema):
    """Request model for registering a supplier."""

    name: str = Field(..., min_length=3, description="Supplier name")
    nif: Nif = Field(..., description="Tax identification number")
    email: Optional[Email] = Field(None, description="Contact email")
    phone: Optional[str] = Field(None, description="Contact phone")
    address: Optional[str] = Field(None, description="Address")
    contact_person: Optional[str] = Field(None, description="Contact person")
    categories: str = Field(..., min_length=1, description="Comma-separated service categories")
    notes: Optional[str] = Field(None, description="Notes")
    tags: Optional[str] = Field(None, description="Comma-separated tags")
    favorite: bool = Field(default=False, description="Marked as favorite")
    active: bool = Field(default=True, description="Whether the supplier is active")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate supplier name."""
        if not v.strip():
            raise ValueError('Supplier name cannot be empty')
        return v.strip()


class UpdateSupplierRequest(BaseSchema):
    """Request model for updating a supplier."""

    name: Optional[str] = Field(None, min_length=3, description="Supplier name")
    nif: Optional[Nif] = Field(None, description="Tax identification number")
    email: Optional[Email] = Field(None, description="Contact email")
    phone: Optional[str] = Field(None, description="Contact phone")
    address: Optional[str] = Field(None, description="Address")
    contact_person: Optional[str] = Field(None, description="Contact person")
    categories: Optional[str] = Field(None, min_length=1, description="Service categories")
    notes: Optional[str] = Field(None, description="Notes")
    tags: Optional[str] = Field(None, description="Comma-separated tags")
    favorite: Optional[bool] = Field(None, description="Marked as favorite")
    active: Optional[bool] = Field(None, description="Whether the supplier is active")


class SupplierFilters(PaginationParams):
    """Filters for supplier listings."""

    categories: Optional[str] = Field(None, description="Comma-separated categories (all must match)")
    favorite: QueryFlag = Field(None, description="Filter by favorite flag")
    active: QueryFlag = Field(None, description="Filter by active flag")
    has_email: QueryFlag = Field(None, description="Filter by email presence")


# Projects

class CreateProjectRequest(BaseSchema):
    """Request model for creating a works project."""

    condominium_id: UuidStr = Field(..., description="Condominium")
    title: str = Field(..., min_length=5, description="Title")
    description: str = Field(..., min_length=10, description="Description")
    budget_estimate: float = Field(..., ge=0, description="Estimated budget in EUR")
    start_date: Optional[datetime] = Field(None, description="Planned start")
    end_date: Optional[datetime] = Field(None, description="Planned end")
    supplier_id: Optional[UuidStr] = Field(None, description="Contracted supplier")
    notes: Optional[str] = Field(None, description="Notes")


class UpdateProjectRequest(BaseSchema):
    """Request model for updating a project."""

    title: Optional[str] = Field(None, min_length=5, description="Title")
    description: Optional[str] = Field(None, min_length=10, description="Description")
    status: Optional[ProjectStatus] = Field(None, description="Lifecycle status")
    budget_estimate: Optional[float] = Field(None, ge=0, description="Estimated budget in EUR")
    start_date: Optional[datetime] = Field(None, description="Planned start")
    end_date: Optional[datetime] = Field(None, description="Planned end")
    supplier_id: Optional[UuidStr] = Field(None, description="Contracted supplier")
    notes: Optional[str] = Field(None, description="Notes")


# Assemblies

class AgendaItem(BaseSchema):
    """Item on an assembly agenda."""

    order: int = Field(..., description="Position on the agenda")
    title: str = Field(..., min_length=3, description="Item title")
    description: Optional[str] = Field(None, description="Item description")


class Decision(BaseSchema):
    """Decision taken in an assembly."""

    description: str = Field(..., min_length=3, description="What was decided")
    result: str = Field(..., description="APROVADA, REJEITADA or ADIADA")


class Minutes(BaseSchema):
    """Assembly minutes."""

    content: str = Field(..., description="Minutes text")
    signed_file: Optional[str] = Field(None, description="Signed minutes file")


class CreateAssemblyRequest(BaseSchema):
    """Request model for creating a general assembly."""

    condominium_id: UuidStr = Field(..., description="Condominium")
    year: int = Field(..., ge=2000, description="Fiscal year")
    type: AssemblyType = Field(default=AssemblyType.AGO, description="AGO or AGE")
    status: AssemblyStatus = Field(default=AssemblyStatus.NAO_MARCADA, description="Status")
    date: Optional[datetime] = Field(None, description="Scheduled date")
    location: Optional[str] = Field(None, description="Venue")
    agenda_items: Optional[List[AgendaItem]] = Field(None, description="Agenda")
    decisions: Optional[List[Decision]] = Field(None, description="Decisions")
    minutes: Optional[Minutes] = Field(None, description="Minutes")


class UpdateAssemblyRequest(BaseSchema):
    """Request model for updating a general assembly."""

    condominium_id: Optional[UuidStr] = Field(None, description="Condominium")
    year: Optional[int] = Field(None, ge=2000, description="Fiscal year")
    type: Optional[AssemblyType] = Field(None, description="AGO or AGE")
    status: Optional[AssemblyStatus] = Field(None, description="Status")
    date: Optional[datetime] = Field(None, description="Scheduled date")
    location: Optional[str] = Field(None, description="Venue")
    agenda_items: Optional[List[AgendaItem]] = Field(None, description="Agenda")
    decisions: Optional[List[Decision]] = Field(None, description="Decisions")
    minutes: Optional[Minutes] = Field(None, description="Minutes")


# Documents

class CreateDocumentRequest(BaseSchema):
    """Request model for registering an uploaded document."""

    condominium_id: UuidStr = Field(..., description="Condominium")
    assembly_id: Optional[UuidStr] = Field(None, description="Related assembly")
    occurrence_id: Optional[UuidStr] = Field(None, description="Related occurrence")
    supplier_id: Optional[UuidStr] = Field(None, description="Related supplier")
    project_id: Optional[UuidStr] = Field(None, description="Related project")
    transaction_id: Optional[UuidStr] = Field(None, description="Related transaction")
    category: DocumentCategory = Field(..., description="Category")
    title: str = Field(..., min_length=3, description="Title")
    description: Optional[str] = Field(None, description="Description")
    file_name: str = Field(..., min_length=1, description="Stored file name")
    tags: Optional[str] = Field(None, description="Comma-separated tags")


# Contacts

class CreateContactRequest(BaseSchema):
    """Request model for adding a condominium contact."""

    condominium_id: UuidStr = Field(..., description="Condominium")
    name: str = Field(..., min_length=3, description="Name")
    role: ContactRole = Field(..., description="Role")
    email: Optional[Email] = Field(None, description="Email")
    phone: Optional[str] = Field(None, description="Phone")
    description: Optional[str] = Field(None, description="Description")
    is_public: bool = Field(default=True, description="Visible to residents")


class UpdateContactRequest(BaseSchema):
    """Request model for updating a contact."""

    condominium_id: Optional[UuidStr] = Field(None, description="Condominium")
    name: Optional[str] = Field(None, min_length=3, description="Name")
    role: Optional[ContactRole] = Field(None, description="Role")
    email: Optional[Email] = Field(None, description="Email")
    phone: Optional[str] = Field(None, description="Phone")
    description: Optional[str] = Field(None, description="Description")
    is_public: Optional[bool] = Field(None, description="Visible to residents")
