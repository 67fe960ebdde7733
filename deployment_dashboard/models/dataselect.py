"""
Data select query models
Filter, sort and pagination settings consumed by the generic data selector
"""

from typing import List, Optional
from pydantic import BaseModel, Field


# Property names understood by the resource cells
NAME_PROPERTY = "name"
NAMESPACE_PROPERTY = "namespace"
CREATION_TIMESTAMP_PROPERTY = "creationTimestamp"
REPLICAS_PROPERTY = "replicas"


class SortBy(BaseModel):
    """One sort key"""
    property_name: str
    ascending: bool = True


class SortQuery(BaseModel):
    """Ordered sort keys, the first one is primary"""
    sort_by_list: List[SortBy] = []


class FilterQuery(BaseModel):
    """Case-insensitive substring filter over one or more properties"""
    text: str
    properties: List[str] = [NAME_PROPERTY]


class PaginationQuery(BaseModel):
    """Zero-based page selection"""
    page_size: int = Field(ge=1)
    page_number: int = Field(default=0, ge=0)

    def start_index(self) -> int:
        return self.page_number * self.page_size

    def end_index(self) -> int:
        return self.start_index() + self.page_size


class DataSelectQuery(BaseModel):
    """Selection spec: every part is optional and absent means identity"""
    filter_query: Optional[FilterQuery] = None
    sort_query: Optional[SortQuery] = None
    pagination_query: Optional[PaginationQuery] = None


class NamespaceQuery(BaseModel):
    """Namespaces to list from; empty means all namespaces"""
    namespaces: List[str] = []

    def to_request_param(self) -> Optional[str]:
        """Namespace for a namespaced list call, None for a cluster-wide one"""
        if len(self.namespaces) == 1:
            return self.namespaces[0]
        return None

    def matches(self, namespace: Optional[str]) -> bool:
        if not self.namespaces:
            return True
        return namespace in self.namespaces


def parse_sort_query(raw: Optional[str]) -> Optional[SortQuery]:
    """Parse a sort string such as ``a,name,d,creationTimestamp``

    Items come in pairs of direction (``a`` or ``d``) and property name.

    Raises:
        ValueError: odd number of items or unknown direction
    """
    if not raw:
        return None

    parts = [part.strip() for part in raw.split(",")]
    if len(parts) % 2 == 1:
        raise ValueError(f"sortBy must be direction,property pairs: {raw!r}")

    sort_by_list = []
    for i in range(0, len(parts), 2):
        direction, prop = parts[i], parts[i + 1]
        if direction not in ("a", "d"):
            raise ValueError(f"Unknown sort direction {direction!r}, expected 'a' or 'd'")
        sort_by_list.append(SortBy(property_name=prop, ascending=direction == "a"))

    return SortQuery(sort_by_list=sort_by_list)


def build_data_select_query(
    filter_text: Optional[str] = None,
    filter_by: Optional[str] = None,
    sort_by: Optional[str] = None,
    sort_field: Optional[str] = None,
    sort_ascending: bool = True,
    page_number: Optional[int] = None,
    page_size: Optional[int] = None,
    default_page_size: int = 10,
) -> DataSelectQuery:
    """Build a DataSelectQuery from consumer supplied parameters

    ``sort_by`` (pair form) wins over ``sort_field``/``sort_ascending``.
    A page number without a size uses ``default_page_size``.
    """
    filter_query = None
    if filter_text:
        properties = [p.strip() for p in (filter_by or NAME_PROPERTY).split(",") if p.strip()]
        filter_query = FilterQuery(text=filter_text, properties=properties or [NAME_PROPERTY])

    sort_query = parse_sort_query(sort_by)
    if sort_query is None and sort_field:
        sort_query = SortQuery(sort_by_list=[SortBy(property_name=sort_field, ascending=sort_ascending)])

    pagination_query = None
    if page_size is not None or page_number is not None:
        pagination_query = PaginationQuery(
            page_size=page_size if page_size is not None else default_page_size,
            page_number=page_number or 0,
        )

    return DataSelectQuery(
        filter_query=filter_query,
        sort_query=sort_query,
        pagination_query=pagination_query,
    )


__all__ = [
    "NAME_PROPERTY",
    "NAMESPACE_PROPERTY",
    "CREATION_TIMESTAMP_PROPERTY",
    "REPLICAS_PROPERTY",
    "SortBy",
    "SortQuery",
    "FilterQuery",
    "PaginationQuery",
    "DataSelectQuery",
    "NamespaceQuery",
    "parse_sort_query",
    "build_data_select_query",
]
