# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for Pydantic models.
"""

import uuid
import pytest
from datetime import datetime, timezone
from pydantic import ValidationError

from models import NIF_CHECKSUM_MESSAGE, NIF_FORMAT_MESSAGE
from models.entities import Condominium, Fraction, Occurrence, Supplier, UserContext
from models.enums import OccurrenceStatus, PaymentStatus, SortOrder
from models.requests import (
    CreateAssemblyRequest,
    CreateCondominiumRequest,
    CreateFractionRequest,
    CreateOccurrenceRequest,
    CreateSupplierRequest,
    CreateTransactionRequest,
    LoginRequest,
    OccurrenceAssignmentRequest,
    OccurrenceFilters,
    PaginationParams,
    RegisterPaymentRequest,
    SupplierFilters,
    UpdateCondominiumRequest,
    UpdateSupplierRequest,
)


def _errors_for(exc_info, field):
    return [e for e in exc_info.value.errors() if e["loc"] == (field,)]


class TestNifField:
    """Test the NIF rule on supplier and condominium schemas."""

    def test_valid_nif_accepted(self, sample_supplier_data):
        """A supplier with a valid NIF validates unchanged."""
        supplier = CreateSupplierRequest(**sample_supplier_data)
        assert supplier.nif == "123456789"

    def test_checksum_failure(self, sample_supplier_data):
        """A 9-digit NIF with the wrong check digit reports a checksum error."""
        sample_supplier_data["nif"] = "123456780"

        with pytest.raises(ValidationError) as exc_info:
            CreateSupplierRequest(**sample_supplier_data)

        errors = _errors_for(exc_info, "nif")
        assert len(errors) == 1
        assert errors[0]["type"] == "nif_checksum"
        assert errors[0]["msg"] == NIF_CHECKSUM_MESSAGE
        assert errors[0]["ctx"] == {"reason": "bad_checksum"}

    @pytest.mark.parametrize("nif", ["12345678", "12345678a", "", "1234567890"])
    def test_format_failure(self, sample_supplier_data, nif):
        """Inputs that are not 9 digits report only the format error."""
        sample_supplier_data["nif"] = nif

        with pytest.raises(ValidationError) as exc_info:
            CreateSupplierRequest(**sample_supplier_data)

        errors = _errors_for(exc_info, "nif")
        assert len(errors) == 1
        assert errors[0]["type"] == "nif_format"
        assert errors[0]["msg"] == NIF_FORMAT_MESSAGE

    def test_leading_digit_failure(self, sample_supplier_data):
        """A disallowed leading digit uses the checksum message with its own reason."""
        sample_supplier_data["nif"] = "423456784"

        with pytest.raises(ValidationError) as exc_info:
            CreateSupplierRequest(**sample_supplier_data)

        errors = _errors_for(exc_info, "nif")
        assert len(errors) == 1
        assert errors[0]["type"] == "nif_checksum"
        assert errors[0]["msg"] == NIF_CHECKSUM_MESSAGE
        assert errors[0]["ctx"] == {"reason": "bad_leading_digit"}

    def test_format_and_checksum_messages_differ(self):
        """Users see different feedback for typos and wrong numbers."""
        assert NIF_FORMAT_MESSAGE == "NIF must be 9 digits"
        assert NIF_CHECKSUM_MESSAGE == "NIF has an invalid identifier checksum"
        assert NIF_FORMAT_MESSAGE != NIF_CHECKSUM_MESSAGE

    def test_integer_nif_rejected(self, sample_supplier_data):
        """NIFs must be sent as strings."""
        sample_supplier_data["nif"] = 123456789

        with pytest.raises(ValidationError) as exc_info:
            CreateSupplierRequest(**sample_supplier_data)

        assert _errors_for(exc_info, "nif")[0]["type"] == "string_type"

    def test_other_fields_still_reported(self, sample_supplier_data):
        """A bad NIF does not hide errors on other fields."""
        sample_supplier_data["nif"] = "123456780"
        sample_supplier_data["email"] = "not-an-email"

        with pytest.raises(ValidationError) as exc_info:
            CreateSupplierRequest(**sample_supplier_data)

        fields = {e["loc"][0] for e in exc_info.value.errors()}
        assert fields == {"nif", "email"}

    def test_condominium_uses_same_rule(self, sample_condominium_data):
        """Condominium NIFs get the checksum rule too."""
        assert CreateCondominiumRequest(**sample_condominium_data).nif == "509442013"

        sample_condominium_data["nif"] = "509442010"
        with pytest.raises(ValidationError) as exc_info:
            CreateCondominiumRequest(**sample_condominium_data)

        assert _errors_for(exc_info, "nif")[0]["type"] == "nif_checksum"

    def test_update_nif_optional(self):
        """Updates may omit the NIF, but a supplied one is checked."""
        assert UpdateSupplierRequest().nif is None
        assert UpdateCondominiumRequest(nif="500000000").nif == "500000000"

        with pytest.raises(ValidationError):
            UpdateSupplierRequest(nif="500000001")

    def test_stored_records_not_revalidated(self):
        """Stored suppliers carry whatever NIF they were saved with."""
        supplier = Supplier(name="Legacy", nif="123456780")
        assert supplier.nif == "123456780"


class TestSupplierRequest:
    """Test supplier request validation."""

    def test_camel_case_aliases(self, sample_supplier_data):
        """Wire names are camelCase."""
        supplier = CreateSupplierRequest(**sample_supplier_data)
        assert supplier.contact_person == "João Silva"
        assert supplier.to_wire()["contactPerson"] == "João Silva"

    def test_email_lowercased(self, sample_supplier_data):
        """Emails are normalized to lowercase."""
        sample_supplier_data["email"] = "Geral@Silva.PT"
        assert CreateSupplierRequest(**sample_supplier_data).email == "geral@silva.pt"

    def test_blank_name_rejected(self, sample_supplier_data):
        """Whitespace-only names are rejected."""
        sample_supplier_data["name"] = "    "

        with pytest.raises(ValidationError) as exc_info:
            CreateSupplierRequest(**sample_supplier_data)

        assert "Supplier name cannot be empty" in str(exc_info.value)

    def test_name_stripped(self, sample_supplier_data):
        """Surrounding whitespace is removed from names."""
        sample_supplier_data["name"] = "  Canalizações Silva  "
        assert CreateSupplierRequest(**sample_supplier_data).name == "Canalizações Silva"

    def test_categories_required(self, sample_supplier_data):
        """At least one category is required."""
        sample_supplier_data["categories"] = ""

        with pytest.raises(ValidationError):
            CreateSupplierRequest(**sample_supplier_data)

    def test_defaults(self, sample_supplier_data):
        """Suppliers are active and not favorite by default."""
        del sample_supplier_data["favorite"]
        supplier = CreateSupplierRequest(**sample_supplier_data)
        assert supplier.favorite is False
        assert supplier.active is True


class TestCondominiumRequest:
    """Test condominium request validation."""

    @pytest.mark.parametrize("postal_code", ["1000001", "100-0001", "ABCD-EFG", "1000-001 "])
    def test_invalid_postal_code(self, sample_condominium_data, postal_code):
        """Postal codes must look like 1234-567."""
        sample_condominium_data["postalCode"] = postal_code

        with pytest.raises(ValidationError) as exc_info:
            CreateCondominiumRequest(**sample_condominium_data)

        assert "Invalid postal code" in str(exc_info.value)

    def test_short_name_rejected(self, sample_condominium_data):
        """Names need at least three characters."""
        sample_condominium_data["name"] = "Ed"

        with pytest.raises(ValidationError):
            CreateCondominiumRequest(**sample_condominium_data)

    def test_snake_case_population(self, sample_condominium_data):
        """Python names are accepted alongside wire names."""
        data = dict(sample_condominium_data)
        data["postal_code"] = data.pop("postalCode")
        data["bank_account"] = data.pop("bankAccount")

        condominium = CreateCondominiumRequest(**data)
        assert condominium.postal_code == "1000-001"


class TestOtherRequests:
    """Test the remaining request schemas."""

    def test_login_request(self):
        """Login needs an email and a 6+ character password."""
        assert LoginRequest(email="Ana@CondoFlow.pt", password="secret").email == "ana@condoflow.pt"

        with pytest.raises(ValidationError):
            LoginRequest(email="ana@condoflow.pt", password="short")

    def test_fraction_permillage_bounds(self):
        """Permillage must be between 0 and 1000."""
        data = {
            "condominiumId": str(uuid.uuid4()),
            "number": "A",
            "floor": "1",
            "permillage": 1001,
            "monthlyQuota": 40,
            "ownerName": "Maria Costa"
        }

        with pytest.raises(ValidationError):
            CreateFractionRequest(**data)

        data["permillage"] = 250
        assert CreateFractionRequest(**data).typology == "T2"

    def test_condominium_id_must_be_uuid(self):
        """Foreign keys are UUID strings."""
        with pytest.raises(ValidationError) as exc_info:
            CreateOccurrenceRequest(
                condominiumId="not-a-uuid",
                title="Elevador parado",
                description="O elevador está parado no 3.º andar",
                category="ELEVADOR",
                priority="URGENTE",
                location="Elevador",
                reportedBy="Portaria"
            )

        assert "Invalid UUID" in str(exc_info.value)

    def test_transaction_amount_positive(self):
        """Transaction amounts must be greater than zero."""
        with pytest.raises(ValidationError):
            CreateTransactionRequest(
                condominiumId=str(uuid.uuid4()),
                type="DESPESA",
                category="LIMPEZA",
                amount=0,
                description="Limpeza mensal",
                date="2024-06-01T00:00:00Z"
            )

    def test_payment_amount_positive(self):
        """Payments must be greater than zero."""
        with pytest.raises(ValidationError):
            RegisterPaymentRequest(amount=-5)
        assert RegisterPaymentRequest(amount=10).method is None

    def test_assignment_requires_supplier_key(self):
        """Assignment needs supplierId, which may be null to unassign."""
        with pytest.raises(ValidationError):
            OccurrenceAssignmentRequest()
        assert OccurrenceAssignmentRequest(supplierId=None).supplier_id is None

    def test_assembly_defaults(self):
        """Assemblies default to an unscheduled ordinary assembly."""
        assembly = CreateAssemblyRequest(condominiumId=str(uuid.uuid4()), year=2024)
        assert assembly.type == "AGO"
        assert assembly.status == "NAO_MARCADA"

    def test_invalid_enum_rejected(self):
        """Unknown enum values are rejected."""
        with pytest.raises(ValidationError):
            CreateAssemblyRequest(condominiumId=str(uuid.uuid4()), year=2024, type="XYZ")


class TestFilterModels:
    """Test query-parameter models."""

    def test_pagination_defaults(self):
        """Page 1 with 20 items by default."""
        params = PaginationParams()
        assert params.page == 1
        assert params.page_size == 20
        assert params.sort_order is None

    def test_pagination_bounds(self):
        """Page size is capped at 100 and pages start at 1."""
        with pytest.raises(ValidationError):
            PaginationParams(pageSize=101)
        with pytest.raises(ValidationError):
            PaginationParams(page=0)

    def test_query_strings_coerced(self):
        """Numeric query strings are converted."""
        params = PaginationParams(page="3", pageSize="50", sortOrder="asc")
        assert params.page == 3
        assert params.page_size == 50
        assert params.sort_order == SortOrder.ASC

    @pytest.mark.parametrize("raw,expected", [
        ("true", True),
        ("false", False),
        ("1", False),
        ("yes", False),
        (True, True),
        (None, None),
    ])
    def test_query_flags(self, raw, expected):
        """Only the literal "true" enables a flag."""
        assert SupplierFilters(favorite=raw).favorite is expected

    def test_occurrence_date_aliases(self):
        """Date range parameters are named from/to on the wire."""
        filters = OccurrenceFilters(**{"from": "2024-01-01T00:00:00Z", "to": "2024-02-01T00:00:00Z"})
        assert filters.date_from == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert filters.date_to == datetime(2024, 2, 1, tzinfo=timezone.utc)


class TestEntities:
    """Test stored record models."""

    def test_entity_defaults(self):
        """Entities get an ID and timestamps."""
        condominium = Condominium(
            name="Edifício Atlântico",
            address="Rua do Mar, 10",
            postal_code="1000-001",
            city="Lisboa",
            nif="509442013",
            bank_account="PT50"
        )
        uuid.UUID(condominium.id)
        assert condominium.created_at.tzinfo is not None
        assert condominium.open_occurrences == 0
        assert condominium.risk_level == "LOW"

    def test_update_timestamp(self, make_fraction, now):
        """update_timestamp moves updated_at forward."""
        fraction = make_fraction(updated_at=now)
        fraction.update_timestamp()
        assert fraction.updated_at > now

    def test_occurrence_defaults(self, condominium_id):
        """New occurrences are open with no comments."""
        occurrence = Occurrence(
            condominium_id=condominium_id,
            title="Lâmpada fundida",
            description="Patamar do 2.º andar sem luz",
            category="ELETRICIDADE"
        )
        assert occurrence.priority == "NORMAL"
        assert occurrence.status == OccurrenceStatus.ABERTA
        assert occurrence.comments == []

    def test_fraction_wire_format(self, make_fraction):
        """Serialization uses camelCase keys and enum values."""
        wire = make_fraction().to_wire()
        assert wire["ownerName"] == "Maria Costa"
        assert wire["paymentStatus"] == PaymentStatus.EM_DIA.value
        assert "owner_name" not in wire

    def test_user_context_display_name(self):
        """Audit entries fall back to the email when no name is known."""
        assert UserContext(user_id="u1", name="Ana").display_name == "Ana"
        assert UserContext(user_id="u1", email="ana@condoflow.pt").display_name == "ana@condoflow.pt"
        assert UserContext(user_id="u1").display_name == "u1"

    def test_supplier_rating_bounds(self):
        """Ratings are between 0 and 5."""
        with pytest.raises(ValidationError):
            Supplier(name="X", nif="123456789", rating=6)

    def test_fraction_is_entity(self, make_fraction):
        """Fraction records carry the common entity fields."""
        assert isinstance(make_fraction(), Fraction)
        assert isinstance(make_fraction().created_at, datetime)

    def test_occurrence_is_entity(self, make_occurrence):
        assert isinstance(make_occurrence(), Occurrence)
