# =============================================================================
# core/pods.py  —  Pod Operations
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Maps each pod tool onto a RunPod REST call:
#
#     list_pods    GET    /pods                 (filters → query string)
#     get_pod      GET    /pods/{podId}
#     create_pod   POST   /pods                 (fields → JSON body)
#     update_pod   PATCH  /pods/{podId}
#     start_pod    POST   /pods/{podId}/start
#     stop_pod     POST   /pods/{podId}/stop
#     delete_pod   DELETE /pods/{podId}
#
#   Each function takes an already-validated input model and returns the
#   client's ApiResult untouched.  No reshaping of the remote payload.
# =============================================================================

from core.client import RunPodClient
from core.models import (
    ApiResult,
    CreatePodInput,
    GetPodInput,
    ListPodsInput,
    PodIdInput,
    UpdatePodInput,
)
from core.payloads import path_identifier, to_body, to_query_params


def list_pods(client: RunPodClient, inputs: ListPodsInput) -> ApiResult:
    """List the account's pods.

    Args:
        client: Open RunPod client.
        inputs: Optional filters; list filters repeat the query key.

    Returns:
        ApiResult whose payload is the remote pod list.
    """
    return client.request("/pods", params=to_query_params(inputs))


def get_pod(client: RunPodClient, inputs: GetPodInput) -> ApiResult:
    """Fetch one pod by id.

    Args:
        client: Open RunPod client.
        inputs: Pod id plus the optional include_* flags.

    Returns:
        ApiResult whose payload is the pod record.
    """
    return client.request(f"/pods/{path_identifier(inputs)}", params=to_query_params(inputs))


def create_pod(client: RunPodClient, inputs: CreatePodInput) -> ApiResult:
    """Rent a new pod.

    Args:
        client: Open RunPod client.
        inputs: Pod settings; supplied fields become the JSON body.

    Returns:
        ApiResult whose payload is the created pod.
    """
    return client.request("/pods", method="POST", body=to_body(inputs))


def update_pod(client: RunPodClient, inputs: UpdatePodInput) -> ApiResult:
    """Patch an existing pod.

    Args:
        client: Open RunPod client.
        inputs: Pod id and the fields to change.

    Returns:
        ApiResult whose payload is the updated pod.
    """
    return client.request(f"/pods/{path_identifier(inputs)}", method="PATCH", body=to_body(inputs))


def start_pod(client: RunPodClient, inputs: PodIdInput) -> ApiResult:
    """Start (resume) a stopped pod.

    Args:
        client: Open RunPod client.
        inputs: Id of the pod to start.

    Returns:
        ApiResult with RunPod's answer, or a status object for an empty reply.
    """
    return client.request(f"/pods/{path_identifier(inputs)}/start", method="POST")


def stop_pod(client: RunPodClient, inputs: PodIdInput) -> ApiResult:
    """Stop a running pod.

    Args:
        client: Open RunPod client.
        inputs: Id of the pod to stop.

    Returns:
        ApiResult with RunPod's answer, or a status object for an empty reply.
    """
    return client.request(f"/pods/{path_identifier(inputs)}/stop", method="POST")


def delete_pod(client: RunPodClient, inputs: PodIdInput) -> ApiResult:
    """Terminate a pod permanently.

    Args:
        client: Open RunPod client.
        inputs: Id of the pod to delete.

    Returns:
        ApiResult, usually the {"success": true, "status": ...} object.
    """
    return client.request(f"/pods/{path_identifier(inputs)}", method="DELETE")
