# =============================================================================
# core/templates.py  —  Template Operations
# =============================================================================
#
#     list_templates    GET    /templates
#     get_template      GET    /templates/{templateId}
#     create_template   POST   /templates
#     update_template   PATCH  /templates/{templateId}
#     delete_template   DELETE /templates/{templateId}
# =============================================================================

from core.client import RunPodClient
from core.models import (
    ApiResult,
    CreateTemplateInput,
    ListTemplatesInput,
    TemplateIdInput,
    UpdateTemplateInput,
)
from core.payloads import path_identifier, to_body


def list_templates(client: RunPodClient, inputs: ListTemplatesInput) -> ApiResult:
    """List the account's templates.

    Args:
        client: Open RunPod client.
        inputs: Takes no fields.

    Returns:
        ApiResult whose payload is the remote template list.
    """
    return client.request("/templates")


def get_template(client: RunPodClient, inputs: TemplateIdInput) -> ApiResult:
    """Fetch one template.

    Args:
        client: Open RunPod client.
        inputs: Id of the template.

    Returns:
        ApiResult whose payload is the template record.
    """
    return client.request(f"/templates/{path_identifier(inputs)}")


def create_template(client: RunPodClient, inputs: CreateTemplateInput) -> ApiResult:
    """Create a pod or serverless template.

    Args:
        client: Open RunPod client.
        inputs: Template name, image and optional settings.

    Returns:
        ApiResult whose payload is the created template.
    """
    return client.request("/templates", method="POST", body=to_body(inputs))


def update_template(client: RunPodClient, inputs: UpdateTemplateInput) -> ApiResult:
    """Patch an existing template.

    Args:
        client: Open RunPod client.
        inputs: Template id and the fields to change.

    Returns:
        ApiResult whose payload is the updated template.
    """
    return client.request(
        f"/templates/{path_identifier(inputs)}", method="PATCH", body=to_body(inputs)
    )


def delete_template(client: RunPodClient, inputs: TemplateIdInput) -> ApiResult:
    """Delete a template.

    Args:
        client: Open RunPod client.
        inputs: Id of the template to delete.

    Returns:
        ApiResult, usually the {"success": true, "status": ...} object.
    """
    return client.request(f"/templates/{path_identifier(inputs)}", method="DELETE")
