"""
Pagination state for grids.

Turns a total row count, a requested page and a requested page size into a
validated offset/limit pair, and builds the navigation URLs for page links.

Invalid page or page-size input never raises: it falls back to the
configured default.
"""

import logging
import math
import re
import sys
from dataclasses import dataclass, field
from typing import Optional

from django.core.paginator import Paginator
from django.utils.http import urlencode

logger = logging.getLogger(__name__)

ELLIPSIS = Paginator.ELLIPSIS

_INTEGER_RE = re.compile(r"^[+-]?\d+$", re.ASCII)


def is_valid_page_number(value) -> bool:
    """
    Check if a value can be used as a page number or a page size.

    The value must convert to an integer without losing anything
    (``"3"`` and ``3`` are fine, ``"3.5"``, ``3.5`` and ``"abc"`` are not)
    and the integer must be between 1 and ``sys.maxsize``.
    """
    if value is None or isinstance(value, bool):
        return False

    if isinstance(value, str):
        value = value.strip()
        if not _INTEGER_RE.match(value):
            return False
        return 1 <= int(value) <= sys.maxsize

    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return False

    return number == value and 1 <= number <= sys.maxsize


def resolve_per_page(requested, default: int) -> int:
    """
    Return ``requested`` as an int if it is a valid page size, else ``default``.
    """
    if is_valid_page_number(requested):
        return int(requested)

    if requested is not None:
        logger.debug("Ignoring invalid per-page value %r, using %s", requested, default)
    return default


def resolve_page(requested, default: int = 1) -> int:
    """
    Return ``requested`` as an int if it is a valid page number, else ``default``.
    """
    if is_valid_page_number(requested):
        return int(requested)

    if requested is not None:
        logger.debug("Ignoring invalid page value %r, using %s", requested, default)
    return default


def compute_offset_limit(current_page: int, per_page: int) -> tuple[int, int]:
    """
    Offset and limit of a page. Both arguments must already be validated.
    """
    return per_page * (current_page - 1), per_page


def build_url(
    base_url: str,
    existing: Optional[dict] = None,
    overrides: Optional[dict] = None,
    fragment: Optional[str] = None,
) -> str:
    """
    Build a navigation URL.

    ``overrides`` win over ``existing`` on key collisions. Keys keep the order
    of ``existing`` followed by any new keys from ``overrides``. Keys whose
    value ends up ``None`` are left out.
    """
    parameters = {
        key: value
        for key, value in {**(existing or {}), **(overrides or {})}.items()
        if value is not None
    }

    url = base_url
    if parameters:
        url += "?" + urlencode(parameters, doseq=True)
    if fragment:
        url += "#" + fragment
    return url


@dataclass
class PaginationState:
    """
    Request-scoped pagination state of one grid.

    ``offset`` and ``limit`` are always derived from ``current_page`` and
    ``per_page``.
    """

    current_page: int = 1
    per_page: int = 25
    per_page_choices: list = field(default_factory=list)
    total_count: int = 0
    fragment: Optional[str] = None
    base_url: str = ""
    parameters: dict = field(default_factory=dict)
    page_param: str = "page"

    def set_total_count(self, count: int):
        if count < 0:
            raise ValueError("total count cannot be negative")
        self.total_count = count

    def clamp(self):
        """
        Move ``current_page`` back to the last page when it points past it.
        """
        if self.current_page > self.last_page:
            logger.debug(
                "Page %s is past the last page, using %s",
                self.current_page,
                self.last_page,
            )
            self.current_page = self.last_page
        return self

    @property
    def offset(self) -> int:
        return compute_offset_limit(self.current_page, self.per_page)[0]

    @property
    def limit(self) -> int:
        return compute_offset_limit(self.current_page, self.per_page)[1]

    @property
    def last_page(self) -> int:
        return max(math.ceil(self.total_count / self.per_page), 1)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.last_page

    @property
    def first_item(self) -> int:
        if self.total_count == 0:
            return 0
        return self.offset + 1

    @property
    def last_item(self) -> int:
        if self.total_count == 0:
            return 0
        return min(self.offset + self.limit, self.total_count)

    def url(self, page: int) -> str:
        return build_url(
            self.base_url,
            self.parameters,
            {self.page_param: page},
            self.fragment,
        )

    def previous_url(self) -> Optional[str]:
        return self.url(self.current_page - 1) if self.has_previous else None

    def next_url(self) -> Optional[str]:
        return self.url(self.current_page + 1) if self.has_next else None

    def page_range(self, on_each_side: int = 3, on_ends: int = 2):
        """
        Page numbers for a navigation bar, with ``ELLIPSIS`` marking gaps.
        """
        paginator = Paginator(range(self.total_count), self.per_page)
        return list(
            paginator.get_elided_page_range(
                self.current_page, on_each_side=on_each_side, on_ends=on_ends
            )
        )

    def links(self, on_each_side: int = 3, on_ends: int = 2) -> list:
        links = []
        for page in self.page_range(on_each_side=on_each_side, on_ends=on_ends):
            if page == ELLIPSIS:
                links.append({"label": page, "url": None, "active": False})
            else:
                links.append(
                    {
                        "label": page,
                        "url": self.url(page),
                        "active": page == self.current_page,
                    }
                )
        return links
