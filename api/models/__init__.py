# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Models package - Pydantic schemas and data models for the CondoFlow platform.
"""

# Base models
from .base import BaseSchema, BaseEntity

# Shared field types
from .fields import (
    Nif,
    PostalCode,
    Email,
    UuidStr,
    QueryFlag,
    NIF_FORMAT_MESSAGE,
    NIF_CHECKSUM_MESSAGE
)

# Enumerations
from .enums import (
    UserRole,
    RiskLevel,
    PaymentStatus,
    FractionTypology,
    FractionOccupation,
    OccurrenceStatus,
    OccurrencePriority,
    OccurrenceCategory,
    AssemblyStatus,
    AssemblyType,
    ProjectStatus,
    TransactionType,
    TransactionCategory,
    PaymentMethod,
    TransactionStatus,
    DocumentCategory,
    ContactRole,
    SortOrder,
    PriorityType,
    Urgency
)

# Stored records
from .entities import (
    User,
    Condominium,
    Fraction,
    Occurrence,
    OccurrenceComment,
    OccurrenceAuditLog,
    Supplier,
    Transaction,
    Project,
    Assembly,
    Document,
    Contact,
    UserContext
)

# Request models
from .requests import (
    PaginationParams,
    LoginRequest,
    CreateCondominiumRequest,
    UpdateCondominiumRequest,
    CreateFractionRequest,
    UpdateFractionRequest,
    FractionFilters,
    RegisterPaymentRequest,
    CreateOccurrenceRequest,
    UpdateOccurrenceRequest,
    OccurrenceFilters,
    OccurrenceCommentRequest,
    OccurrenceAssignmentRequest,
    OccurrenceStatusRequest,
    CreateTransactionRequest,
    TransactionFilters,
    CreateSupplierRequest,
    UpdateSupplierRequest,
    SupplierFilters,
    CreateProjectRequest,
    UpdateProjectRequest,
    AgendaItem,
    Decision,
    Minutes,
    CreateAssemblyRequest,
    UpdateAssemblyRequest,
    CreateDocumentRequest,
    CreateContactRequest,
    UpdateContactRequest
)

# Response models
from .responses import (
    PaginatedResponse,
    FieldError,
    ErrorResponse,
    ValidationErrorResponse,
    SuccessResponse,
    LoginResponse,
    TransactionSummary,
    OccurrenceStats,
    PaymentRegistration,
    DashboardStats,
    PriorityItem,
    AtRiskCondominium
)

__all__ = [
    # Base models
    "BaseSchema",
    "BaseEntity",

    # Shared field types
    "Nif",
    "PostalCode",
    "Email",
    "UuidStr",
    "QueryFlag",
    "NIF_FORMAT_MESSAGE",
    "NIF_CHECKSUM_MESSAGE",

    # Enumerations
    "UserRole",
    "RiskLevel",
    "PaymentStatus",
    "FractionTypology",
    "FractionOccupation",
    "OccurrenceStatus",
    "OccurrencePriority",
    "OccurrenceCategory",
    "AssemblyStatus",
    "AssemblyType",
    "ProjectStatus",
    "TransactionType",
    "TransactionCategory",
    "PaymentMethod",
    "TransactionStatus",
    "DocumentCategory",
    "ContactRole",
    "SortOrder",
    "PriorityType",
    "Urgency",

    # Stored records
    "User",
    "Condominium",
    "Fraction",
    "Occurrence",
    "OccurrenceComment",
    "OccurrenceAuditLog",
    "Supplier",
    "Transaction",
    "Project",
    "Assembly",
    "Document",
    "Contact",
    "UserContext",

    # Request models
    "PaginationParams",
    "LoginRequest",
    "CreateCondominiumRequest",
    "UpdateCondominiumRequest",
    "CreateFractionRequest",
    "UpdateFractionRequest",
    "FractionFilters",
    "RegisterPaymentRequest",
    "CreateOccurrenceRequest",
    "UpdateOccurrenceRequest",
    "OccurrenceFilters",
    "OccurrenceCommentRequest",
    "OccurrenceAssignmentRequest",
    "OccurrenceStatusRequest",
    "CreateTransactionRequest",
    "TransactionFilters",
    "CreateSupplierRequest",
    "UpdateSupplierRequest",
    "SupplierFilters",
    "CreateProjectRequest",
    "UpdateProjectRequest",
    "AgendaItem",
    "Decision",
    "Minutes",
    "CreateAssemblyRequest",
    "UpdateAssemblyRequest",
    "CreateDocumentRequest",
    "CreateContactRequest",
    "UpdateContactRequest",

    # Response models
    "PaginatedResponse",
    "FieldError",
    "ErrorResponse",
    "ValidationErrorResponse",
    "SuccessResponse",
    "LoginResponse",
    "TransactionSummary",
    "OccurrenceStats",
    "PaymentRegistration",
    "DashboardStats",
    "PriorityItem",
    "AtRiskCondominium"
]
