# =============================================================================
# core/endpoints.py  —  Serverless Endpoint Operations
# =============================================================================
#
#     list_endpoints    GET    /endpoints
#     get_endpoint      GET    /endpoints/{endpointId}
#     create_endpoint   POST   /endpoints
#     update_endpoint   PATCH  /endpoints/{endpointId}
#     delete_endpoint   DELETE /endpoints/{endpointId}
#
#   includeTemplate / includeWorkers ride along as query flags on the read
#   calls.  Whether templateId points at a real template is RunPod's concern.
# =============================================================================

from core.client import RunPodClient
from core.models import (
    ApiResult,
    CreateEndpointInput,
    EndpointIdInput,
    GetEndpointInput,
    ListEndpointsInput,
    UpdateEndpointInput,
)
from core.payloads import path_identifier, to_body, to_query_params


def list_endpoints(client: RunPodClient, inputs: ListEndpointsInput) -> ApiResult:
    """List serverless endpoints.

    Args:
        client: Open RunPod client.
        inputs: Optional include_template / include_workers flags.

    Returns:
        ApiResult whose payload is the remote endpoint list.
    """
    return client.request("/endpoints", params=to_query_params(inputs))


def get_endpoint(client: RunPodClient, inputs: GetEndpointInput) -> ApiResult:
    """Fetch one serverless endpoint.

    Args:
        client: Open RunPod client.
        inputs: Endpoint id plus the optional include_* flags.

    Returns:
        ApiResult whose payload is the endpoint record.
    """
    return client.request(
        f"/endpoints/{path_identifier(inputs)}", params=to_query_params(inputs)
    )


def create_endpoint(client: RunPodClient, inputs: CreateEndpointInput) -> ApiResult:
    """Deploy a serverless endpoint from an existing template.

    Args:
        client: Open RunPod client.
        inputs: Template id and scaling settings.

    Returns:
        ApiResult whose payload is the created endpoint.
    """
    return client.request("/endpoints", method="POST", body=to_body(inputs))


def update_endpoint(client: RunPodClient, inputs: UpdateEndpointInput) -> ApiResult:
    """Patch an endpoint's name or scaling settings.

    Args:
        client: Open RunPod client.
        inputs: Endpoint id and the fields to change.

    Returns:
        ApiResult whose payload is the updated endpoint.
    """
    return client.request(
        f"/endpoints/{path_identifier(inputs)}", method="PATCH", body=to_body(inputs)
    )


def delete_endpoint(client: RunPodClient, inputs: EndpointIdInput) -> ApiResult:
    """Delete a serverless endpoint.

    Args:
        client: Open RunPod client.
        inputs: Id of the endpoint to delete.

    Returns:
        ApiResult, usually the {"success": true, "status": ...} object.
    """
    return client.request(f"/endpoints/{path_identifier(inputs)}", method="DELETE")
