# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Pytest configuration and fixtures.
"""

import os
import uuid
import pytest
from datetime import datetime, timezone
from typing import Dict, Any

from models.entities import Assembly, Condominium, Fraction, Occurrence, Supplier, Transaction, UserContext

# Set test environment
os.environ['ENVIRONMENT'] = 'test'


@pytest.fixture
def now():
    """Fixed reference time for time-dependent logic."""
    return datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def condominium_id():
    """Condominium identifier shared by related records."""
    return str(uuid.uuid4())


@pytest.fixture
def user_context():
    """User performing workflow operations."""
    return UserContext(user_id=str(uuid.uuid4()), email="gestor@condoflow.pt", name="Ana Gestora")


@pytest.fixture
def sample_supplier_data() -> Dict[str, Any]:
    """Valid supplier creation payload (wire names)."""
    return {
        "name": "Canalizações Silva",
        "nif": "123456789",
        "email": "geral@silva.pt",
        "phone": "912345678",
        "categories": "CANALIZACAO,AQUECIMENTO",
        "contactPerson": "João Silva",
        "favorite": True
    }


@pytest.fixture
def sample_condominium_data() -> Dict[str, Any]:
    """Valid condominium creation payload (wire names)."""
    return {
        "name": "Edifício Atlântico",
        "address": "Rua do Mar, 10",
        "postalCode": "1000-001",
        "city": "Lisboa",
        "nif": "509442013",
        "bankAccount": "PT50000201231234567890154"
    }


@pytest.fixture
def make_occurrence(condominium_id, now):
    """Factory for stored occurrences."""
    def factory(**overrides) -> Occurrence:
        data = {
            "condominium_id": condominium_id,
            "title": "Infiltração na garagem",
            "description": "Água a escorrer pela parede norte",
            "category": "INFILTRACAO",
            "priority": "NORMAL",
            "status": "ABERTA",
            "created_at": now,
            "updated_at": now,
        }
        data.update(overrides)
        return Occurrence(**data)
    return factory


@pytest.fixture
def make_transaction(condominium_id, now):
    """Factory for stored transactions."""
    def factory(**overrides) -> Transaction:
        data = {
            "condominium_id": condominium_id,
            "condominium_name": "Edifício Atlântico",
            "type": "RECEITA",
            "category": "QUOTA",
            "amount": 50.0,
            "description": "Quota mensal",
            "date": now,
        }
        data.update(overrides)
        return Transaction(**data)
    return factory


@pytest.fixture
def make_supplier():
    """Factory for stored suppliers."""
    def factory(**overrides) -> Supplier:
        data = {
            "name": "Elevadores Norte",
            "nif": "500000000",
            "categories": "ELEVADOR",
        }
        data.update(overrides)
        return Supplier(**data)
    return factory


@pytest.fixture
def make_fraction(condominium_id):
    """Factory for stored fractions."""
    def factory(**overrides) -> Fraction:
        data = {
            "condominium_id": condominium_id,
            "number": "A",
            "floor": "R/C",
            "owner_name": "Maria Costa",
            "permillage": 125.0,
            "monthly_quota": 45.0,
        }
        data.update(overrides)
        return Fraction(**data)
    return factory


@pytest.fixture
def make_condominium(condominium_id):
    """Factory for stored condominiums; the first one uses the shared ID."""
    def factory(**overrides) -> Condominium:
        data = {
            "id": condominium_id,
            "name": "Edifício Atlântico",
            "address": "Rua do Mar, 10",
            "postal_code": "1000-001",
            "city": "Lisboa",
            "nif": "509442013",
            "bank_account": "PT50000201231234567890154",
        }
        data.update(overrides)
        return Condominium(**data)
    return factory


@pytest.fixture
def make_assembly(condominium_id):
    """Factory for stored assemblies."""
    def factory(**overrides) -> Assembly:
        data = {
            "condominium_id": condominium_id,
            "year": 2024,
        }
        data.update(overrides)
        return Assembly(**data)
    return factory
