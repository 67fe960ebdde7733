"""
Generic data selector
Filter, sort and paginate any list of DataCell objects, independent of the resource kind
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, List, Optional, Sequence, Tuple, TypeVar

from deployment_dashboard.models.dataselect import DataSelectQuery, FilterQuery, PaginationQuery, SortQuery

logger = logging.getLogger(__name__)


class ComparableValue(ABC):
    """A property value that can be ordered and text-matched"""

    def __init__(self, value: Any):
        self.value = value

    @abstractmethod
    def compare(self, other: "ComparableValue") -> int:
        """Negative, zero or positive like a classic cmp()"""

    @abstractmethod
    def contains(self, text: str) -> bool:
        """True when the value matches the lower-cased filter text"""

    def __lt__(self, other: "ComparableValue") -> bool:
        return self.compare(other) < 0

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ComparableValue) and self.compare(other) == 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class StdComparableString(ComparableValue):
    def compare(self, other: ComparableValue) -> int:
        return (self.value > other.value) - (self.value < other.value)

    def contains(self, text: str) -> bool:
        return text in self.value.lower()


class StdComparableInt(ComparableValue):
    def compare(self, other: ComparableValue) -> int:
        return (self.value > other.value) - (self.value < other.value)

    def contains(self, text: str) -> bool:
        return text in str(self.value)


class StdComparableTime(ComparableValue):
    value: datetime

    def compare(self, other: ComparableValue) -> int:
        return (self.value > other.value) - (self.value < other.value)

    def contains(self, text: str) -> bool:
        return text in self.value.isoformat().lower()


class DataCell(ABC):
    """Wraps one resource object for the selector"""

    @abstractmethod
    def get_property(self, name: str) -> Optional[ComparableValue]:
        """Comparable value of a property, None when the cell lacks it"""


class _SortKey:
    """Orders missing values before present ones"""

    __slots__ = ("value",)

    def __init__(self, value: Optional[ComparableValue]):
        self.value = value

    def __lt__(self, other: "_SortKey") -> bool:
        if self.value is None:
            return other.value is not None
        if other.value is None:
            return False
        return self.value < other.value


CellT = TypeVar("CellT", bound=DataCell)


def filter_cells(cells: Sequence[CellT], filter_query: Optional[FilterQuery]) -> List[CellT]:
    """Keep cells where any filter property contains the text (case-insensitive)"""
    if filter_query is None or not filter_query.text:
        return list(cells)

    text = filter_query.text.lower()
    result = []
    for cell in cells:
        for prop in filter_query.properties:
            value = cell.get_property(prop)
            if value is not None and value.contains(text):
                result.append(cell)
                break
    return result


def sort_cells(cells: Sequence[CellT], sort_query: Optional[SortQuery]) -> List[CellT]:
    """Stable sort by every key of the query, first key primary"""
    result = list(cells)
    if sort_query is None or not sort_query.sort_by_list or not result:
        return result

    # Stable sorts applied from the least significant key upward
    for sort_by in reversed(sort_query.sort_by_list):
        if all(cell.get_property(sort_by.property_name) is None for cell in result):
            logger.warning(f"Ignoring sort by unknown property: {sort_by.property_name}")
            continue
        result.sort(
            key=lambda cell: _SortKey(cell.get_property(sort_by.property_name)),
            reverse=not sort_by.ascending,
        )
    return result


def paginate_cells(cells: Sequence[CellT], pagination_query: Optional[PaginationQuery]) -> List[CellT]:
    """Slice one page, out-of-range pages are empty"""
    if pagination_query is None:
        return list(cells)

    start = pagination_query.start_index()
    if start >= len(cells):
        return []
    return list(cells[start:min(pagination_query.end_index(), len(cells))])


def generic_data_select(cells: Sequence[CellT], query: Optional[DataSelectQuery]) -> Tuple[List[CellT], int]:
    """Filter, sort and paginate cells

    Args:
        cells: resource cells in source order
        query: selection spec, None selects everything

    Returns:
        tuple: (selected cells, item count after filtering and before pagination)
    """
    if query is None:
        return list(cells), len(cells)

    filtered = filter_cells(cells, query.filter_query)
    filtered_total = len(filtered)
    ordered = sort_cells(filtered, query.sort_query)
    return paginate_cells(ordered, query.pagination_query), filtered_total


__all__ = [
    "ComparableValue",
    "StdComparableString",
    "StdComparableInt",
    "StdComparableTime",
    "DataCell",
    "filter_cells",
    "sort_cells",
    "paginate_cells",
    "generic_data_select",
]
