# SPDX-License-Identifier: Apache-2.0

"""
Supplier listing logic: filters and CSV export.
"""

import csv
import io
from typing import Iterable, List

from models.entities import Supplier
from models.requests import SupplierFilters

CSV_HEADER = ["Nome", "Categorias", "Email", "Telefone", "NIF", "Morada", "Contacto", "Favorito", "Estado", "Tags"]


def split_categories(categories: str) -> List[str]:
    """Split a comma-separated category string, dropping blanks."""
    return [c.strip() for c in categories.split(",") if c.strip()]


def _search_matches(supplier: Supplier, term: str) -> bool:
    haystack = [
        supplier.name,
        supplier.nif,
        supplier.email,
        supplier.phone,
        supplier.tags,
        supplier.contact_person,
    ]
    return any(term in value.lower() for value in haystack if value)


def filter_suppliers(suppliers: Iterable[Supplier], filters: SupplierFilters) -> List[Supplier]:
    """
    Apply supplier listing filters, sorted by name.

    Every category listed in the filter must appear in the supplier's
    categories. has_email=True keeps suppliers with an email, False keeps
    those without one.
    """
    wanted_categories = split_categories(filters.categories) if filters.categories else []
    term = filters.search.lower() if filters.search else None
    matched = []

    for supplier in suppliers:
        if filters.active is not None and supplier.active != filters.active:
            continue
        if filters.favorite is not None and supplier.favorite != filters.favorite:
            continue
        if filters.has_email is True and not supplier.email:
            continue
        if filters.has_email is False and supplier.email:
            continue
        if any(category not in supplier.categories for category in wanted_categories):
            continue
        if term and not _search_matches(supplier, term):
            continue
        matched.append(supplier)

    matched.sort(key=lambda s: s.name.lower())
    return matched


def export_suppliers_csv(suppliers: Iterable[Supplier]) -> str:
    """Render suppliers as CSV, sorted by name."""
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(CSV_HEADER)

    for supplier in sorted(suppliers, key=lambda s: s.name.lower()):
        writer.writerow([
            supplier.name,
            supplier.categories,
            supplier.email or "",
            supplier.phone or "",
            supplier.nif,
            supplier.address or "",
            supplier.contact_person or "",
            "Sim" if supplier.favorite else "Não",
            "Ativo" if supplier.active else "Inativo",
            supplier.tags or "",
        ])

    return output.getvalue()
