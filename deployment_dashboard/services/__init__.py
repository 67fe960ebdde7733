# Business logic services
from .dataselect import generic_data_select
from .deployment import create_deployment_list, get_deployment_list

__all__ = ['generic_data_select', 'create_deployment_list', 'get_deployment_list']
