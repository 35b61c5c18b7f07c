"""Default Google Cloud project and region discovery.

Checks the GOOGLE_CLOUD_* environment variables first, then asks the
gcloud CLI. Probes never fail: any problem yields an empty string.
"""

from __future__ import annotations

import os
import subprocess

PROJECT_ENV_VAR = "GOOGLE_CLOUD_PROJECT"
REGION_ENV_VAR = "GOOGLE_CLOUD_LOCATION"

GCLOUD_TIMEOUT_SECONDS = 10


def _gcloud_config_value(key: str) -> str:
    """Return `gcloud config get-value <key>`, or "" on any failure."""
    try:
        completed = subprocess.run(
            ["gcloud", "config", "get-value", key],
            capture_output=True,
            text=True,
            check=True,
            timeout=GCLOUD_TIMEOUT_SECONDS,
        )
    except (OSError, subprocess.SubprocessError):
        return ""
    return completed.stdout.strip()


def _probe(env_var: str, gcloud_key: str) -> str:
    value = os.environ.get(env_var)
    if value:
        return value
    return _gcloud_config_value(gcloud_key)


def get_gcp_project() -> str:
    """Default project id for the Vertex AI backend."""
    return _probe(PROJECT_ENV_VAR, "project")


def get_gcp_region() -> str:
    """Default region for the Vertex AI backend."""
    return _probe(REGION_ENV_VAR, "compute/region")
