# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Pagination helpers shared by listing handlers.
"""

import math
from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence, TypeVar, Union

from models.requests import PaginationParams
from models.responses import PaginatedResponse

T = TypeVar('T')

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
_PAGINATION_KEYS = ("page", "page_size", "pageSize")


@dataclass(frozen=True)
class PaginationOptions:
    """Resolved pagination window."""
    page: int
    page_size: int
    skip: int
    take: int


def parse_pagination(params: Union[PaginationParams, Mapping[str, Any], None]) -> PaginationOptions:
    """
    Resolve page/page size into an offset window.

    Missing, empty or zero values fall back to page 1 and 20 items per page.
    Raw mappings (e.g. query strings) go through PaginationParams, so "2"
    becomes 2 and negative or oversized values are rejected.

    Args:
        params: PaginationParams (or any subclass) or a raw mapping using
            either snake_case or camelCase keys

    Returns:
        PaginationOptions with skip/take

    Raises:
        pydantic.ValidationError: If a raw mapping holds invalid values
    """
    if not isinstance(params, PaginationParams):
        params = PaginationParams.model_validate({
            key: value for key, value in (params or {}).items()
            if key in _PAGINATION_KEYS and value not in ("", None, 0, "0")
        })

    page = params.page or DEFAULT_PAGE
    page_size = params.page_size or DEFAULT_PAGE_SIZE

    return PaginationOptions(
        page=page,
        page_size=page_size,
        skip=(page - 1) * page_size,
        take=page_size
    )


def create_paginated_response(
    data: List[T],
    total: int,
    options: PaginationOptions
) -> PaginatedResponse[T]:
    """Wrap one page of items with totals."""
    return PaginatedResponse(
        data=data,
        total=total,
        page=options.page,
        page_size=options.page_size,
        total_pages=math.ceil(total / options.page_size)
    )


def paginate(items: Sequence[T], options: PaginationOptions) -> PaginatedResponse[T]:
    """Slice an in-memory sequence into a paginated response."""
    page_items = list(items[options.skip:options.skip + options.take])
    return create_paginated_response(page_items, len(items), options)
