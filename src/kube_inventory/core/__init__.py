"""Core inventory modules: query parsing, resource table, shaping and client access."""

from .errors import InventoryError, InvalidQueryError, UnknownResourceError
from .inventory import ClusterInventory
from .kubeconfig import LoadedConfig, load_client_configuration
from .query import ListQuery, parse_list_query
from .resources import RESOURCE_KINDS, ResourceKind, get_resource_kind
from .shaper import ERROR_CODE, ListEnvelope, shape_error, shape_list

__all__ = [
    'ClusterInventory',
    'ERROR_CODE',
    'InvalidQueryError',
    'InventoryError',
    'ListEnvelope',
    'ListQuery',
    'LoadedConfig',
    'RESOURCE_KINDS',
    'ResourceKind',
    'UnknownResourceError',
    'get_resource_kind',
    'load_client_configuration',
    'parse_list_query',
    'shape_error',
    'shape_list',
]
