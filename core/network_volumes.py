# =============================================================================
# core/network_volumes.py  —  Network Volume Operations
# =============================================================================
#
#     list_network_volumes    GET    /networkvolumes
#     get_network_volume      GET    /networkvolumes/{networkVolumeId}
#     create_network_volume   POST   /networkvolumes
#     update_network_volume   PATCH  /networkvolumes/{networkVolumeId}
#     delete_network_volume   DELETE /networkvolumes/{networkVolumeId}
#
#   A volume lives in one data center; pods that mount it must run there.
# =============================================================================

from core.client import RunPodClient
from core.models import (
    ApiResult,
    CreateNetworkVolumeInput,
    ListNetworkVolumesInput,
    NetworkVolumeIdInput,
    UpdateNetworkVolumeInput,
)
from core.payloads import path_identifier, to_body

_COLLECTION = "/networkvolumes"


def list_network_volumes(client: RunPodClient, inputs: ListNetworkVolumesInput) -> ApiResult:
    """List network volumes.

    Args:
        client: Open RunPod client.
        inputs: Takes no fields.

    Returns:
        ApiResult whose payload is the remote volume list.
    """
    return client.request(_COLLECTION)


def get_network_volume(client: RunPodClient, inputs: NetworkVolumeIdInput) -> ApiResult:
    """Fetch one network volume.

    Args:
        client: Open RunPod client.
        inputs: Id of the volume.

    Returns:
        ApiResult whose payload is the volume record.
    """
    return client.request(f"{_COLLECTION}/{path_identifier(inputs)}")


def create_network_volume(client: RunPodClient, inputs: CreateNetworkVolumeInput) -> ApiResult:
    """Create a network volume in one data center.

    Args:
        client: Open RunPod client.
        inputs: Name, size in GB and data center id.

    Returns:
        ApiResult whose payload is the created volume.
    """
    return client.request(_COLLECTION, method="POST", body=to_body(inputs))


def update_network_volume(client: RunPodClient, inputs: UpdateNetworkVolumeInput) -> ApiResult:
    """Rename or grow a network volume.

    Args:
        client: Open RunPod client.
        inputs: Volume id and the fields to change.

    Returns:
        ApiResult whose payload is the updated volume.
    """
    return client.request(
        f"{_COLLECTION}/{path_identifier(inputs)}", method="PATCH", body=to_body(inputs)
    )


def delete_network_volume(client: RunPodClient, inputs: NetworkVolumeIdInput) -> ApiResult:
    """Delete a network volume.

    Args:
        client: Open RunPod client.
        inputs: Id of the volume to delete.

    Returns:
        ApiResult, usually the {"success": true, "status": ...} object.
    """
    return client.request(f"{_COLLECTION}/{path_identifier(inputs)}", method="DELETE")
