"""Shared fixtures for bulk labeling tests."""

from __future__ import annotations

import pytest

from bulk_labeling import config


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every labeling key from the process environment."""
    for key in config.ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture()
def full_env() -> dict[str, str]:
    return {
        "CONFIG_FILE_PATH": "/etc/oci/config",
        "CONFIG_PROFILE": "DEFAULT",
        "DLS_DP_URL": "https://dls.example.com",
        "OBJECT_STORAGE_URL": "https://objectstorage.example.com",
        "DATASET_ID": "ocid1.dataset.oc1..abc",
        "REGION": "us-phoenix-1",
        "LABELING_ALGORITHM": "first_letter_match",
        "THREAD_COUNT": "8",
        "LABELS": "cat, dog,,cat",
        "CUSTOM_LABELS": '{"pets": ["cat", "dog"], "bird": "bird"}',
        "FIRST_MATCH_REGEX_PATTERN": "^(cat|dog)",
        "OBJECT_STORAGE_BUCKET_NAME": "bucket",
        "OBJECT_STORAGE_NAMESPACE": "ns",
        "DATASET_DIRECTORY_PATH": "images/",
        "TENANT": "tenant-a",
    }
