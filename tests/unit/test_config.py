"""Tests for the environment constants manifest."""

from __future__ import annotations

import importlib

from bulk_labeling import config


class TestNumericDefaults:
    def test_max_list_records_limits(self) -> None:
        assert config.MAX_LIST_RECORDS_LIMITS == 1000

    def test_default_thread_count(self) -> None:
        assert config.DEFAULT_THREAD_COUNT == 30


class TestEnvironmentKeys:
    def test_keys_equal_their_names(self) -> None:
        for name in [
            "CONFIG_FILE_PATH",
            "CONFIG_PROFILE",
            "DLS_DP_URL",
            "OBJECT_STORAGE_URL",
            "DATASET_ID",
            "REGION",
            "LABELING_ALGORITHM",
            "THREAD_COUNT",
            "LABELS",
            "CUSTOM_LABELS",
            "FIRST_MATCH_REGEX_PATTERN",
            "OBJECT_STORAGE_BUCKET_NAME",
            "OBJECT_STORAGE_NAMESPACE",
            "DATASET_DIRECTORY_PATH",
            "TENANT",
        ]:
            assert getattr(config, name) == name
        assert len(config.ENV_KEYS) == 15

    def test_service_identifiers(self) -> None:
        assert config.DLS == "DLS"
        assert config.OBJECT_STORAGE == "OBJECT_STORAGE"
        assert config.SERVICES == ("DLS", "OBJECT_STORAGE")

    def test_keys_are_unique(self) -> None:
        assert len(set(config.ENV_KEYS)) == len(config.ENV_KEYS)
        assert not set(config.ENV_KEYS) & set(config.SERVICES)

    def test_values_stable_across_reads_and_reload(self) -> None:
        before = {k: getattr(config, k) for k in config.ENV_KEYS}
        assert {k: getattr(config, k) for k in config.ENV_KEYS} == before
        reloaded = importlib.reload(config)
        assert {k: getattr(reloaded, k) for k in config.ENV_KEYS} == before
        assert reloaded.DEFAULT_THREAD_COUNT == 30
