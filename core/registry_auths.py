# =============================================================================
# core/registry_auths.py  —  Container Registry Credential Operations
# =============================================================================
#
#     list_registry_auths    GET    /containerregistryauth
#     get_registry_auth      GET    /containerregistryauth/{containerRegistryAuthId}
#     create_registry_auth   POST   /containerregistryauth
#     delete_registry_auth   DELETE /containerregistryauth/{containerRegistryAuthId}
#
#   RunPod has no update call for registry credentials; rotate by deleting
#   and re-creating.  The password travels in the create body only and is
#   never echoed back by the API.
# =============================================================================

from core.client import RunPodClient
from core.models import (
    ApiResult,
    CreateRegistryAuthInput,
    ListRegistryAuthsInput,
    RegistryAuthIdInput,
)
from core.payloads import path_identifier, to_body

_COLLECTION = "/containerregistryauth"


def list_registry_auths(client: RunPodClient, inputs: ListRegistryAuthsInput) -> ApiResult:
    """List stored container registry credentials.

    Args:
        client: Open RunPod client.
        inputs: Takes no fields.

    Returns:
        ApiResult whose payload is the remote credential list.
    """
    return client.request(_COLLECTION)


def get_registry_auth(client: RunPodClient, inputs: RegistryAuthIdInput) -> ApiResult:
    """Fetch one registry credential.

    Args:
        client: Open RunPod client.
        inputs: Id of the credential.

    Returns:
        ApiResult whose payload is the credential record.
    """
    return client.request(f"{_COLLECTION}/{path_identifier(inputs)}")


def create_registry_auth(client: RunPodClient, inputs: CreateRegistryAuthInput) -> ApiResult:
    """Store a new registry credential.

    Args:
        client: Open RunPod client.
        inputs: Name, username and password; the password goes only in the body.

    Returns:
        ApiResult whose payload is the created credential.
    """
    return client.request(_COLLECTION, method="POST", body=to_body(inputs))


def delete_registry_auth(client: RunPodClient, inputs: RegistryAuthIdInput) -> ApiResult:
    """Delete a registry credential.

    Args:
        client: Open RunPod client.
        inputs: Id of the credential to delete.

    Returns:
        ApiResult, usually the {"success": true, "status": ...} object.
    """
    return client.request(f"{_COLLECTION}/{path_identifier(inputs)}", method="DELETE")
