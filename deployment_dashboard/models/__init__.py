# Pydantic models
from .dataselect import (
    SortBy, SortQuery, FilterQuery, PaginationQuery, DataSelectQuery, NamespaceQuery,
    build_data_select_query, parse_sort_query,
)
from .deployment import ObjectMeta, TypeMeta, PodInfo, Deployment, ListMeta, DeploymentList

__all__ = [
    # Data select
    'SortBy', 'SortQuery', 'FilterQuery', 'PaginationQuery', 'DataSelectQuery', 'NamespaceQuery',
    'build_data_select_query', 'parse_sort_query',
    # Deployment
    'ObjectMeta', 'TypeMeta', 'PodInfo', 'Deployment', 'ListMeta', 'DeploymentList',
]
