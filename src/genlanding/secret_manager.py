from __future__ import annotations

import logging

from google.cloud import secretmanager

logger = logging.getLogger(__name__)


def access_secret(project_id: str, secret_id: str, *, version: str = "latest") -> str | None:
    """Fetch secret from Secret Manager.

    Args:
        project_id: GCP project ID
        secret_id: Secret ID
        version: Secret version

    Returns:
        Secret value or None if not found
    """
    try:
        client = secretmanager.SecretManagerServiceClient()
        name = f"projects/{project_id}/secrets/{secret_id}/versions/{version}"
        response = client.access_secret_version(name=name)
        return response.payload.data.decode("UTF-8")
    except Exception:
        logger.warning(
            "Failed to fetch secret",
            exc_info=True,
            extra={"secret_id": secret_id, "project_id": project_id},
        )
        return None


__all__ = ["access_secret"]
