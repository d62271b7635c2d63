"""Model types for the Genum node and its runtime."""

from genum_node.models.batch_spec import BatchSpec
from genum_node.models.client_spec import ClientSpec
from genum_node.models.credential import GenumCredential
from genum_node.models.execution_item import ExecutionItem
from genum_node.models.node_enums import CREDENTIAL_NAME, Operation, Resource
from genum_node.models.prompt_record import PromptRecord
from genum_node.models.property_option import ListSearchResult, PropertyOption
from genum_node.models.resource_reference import PlainValue, ResourceReference, SelectedValue
from genum_node.models.run_request_body import RunRequestBody

__all__ = [
    "BatchSpec",
    "CREDENTIAL_NAME",
    "ClientSpec",
    "ExecutionItem",
    "GenumCredential",
    "ListSearchResult",
    "Operation",
    "PlainValue",
    "PromptRecord",
    "PropertyOption",
    "Resource",
    "ResourceReference",
    "RunRequestBody",
    "SelectedValue",
]
