"""
Environment settings for the bulk labeling tool.
- Reads the keys named in bulk_labeling.config from the process environment
- Applies defaults (thread count) and parses list/JSON-valued keys
- Returns an immutable LabelingSettings record or raises ConfigurationError
"""

import json
import logging
import os
import re
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_serializer, field_validator

from . import config


class ConfigurationError(ValueError):
    """Raised when an environment input is missing or malformed."""

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(f"{key}: {message}")


_STRING_FIELDS = (
    "config_file_path",
    "config_profile",
    "dls_dp_url",
    "object_storage_url",
    "dataset_id",
    "region",
    "labeling_algorithm",
    "first_match_regex_pattern",
    "object_storage_bucket_name",
    "object_storage_namespace",
    "dataset_directory_path",
    "tenant",
)


class LabelingSettings(BaseModel):
    """Resolved labeling inputs, one field per environment key (field name == key.lower())."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    config_file_path: Optional[str] = None
    config_profile: Optional[str] = None
    dls_dp_url: Optional[str] = None
    object_storage_url: Optional[str] = None
    dataset_id: str = Field(..., min_length=1)
    region: Optional[str] = None
    labeling_algorithm: Optional[str] = None
    thread_count: int = Field(default=config.DEFAULT_THREAD_COUNT, ge=1)
    labels: Tuple[str, ...] = ()
    custom_labels: Mapping[str, Tuple[str, ...]] = Field(default_factory=dict, validate_default=True)
    first_match_regex_pattern: Optional[str] = None
    object_storage_bucket_name: Optional[str] = None
    object_storage_namespace: Optional[str] = None
    dataset_directory_path: Optional[str] = None
    tenant: Optional[str] = None

    # Same normalization as the environment reader: stripped, blank -> unset
    @field_validator(*_STRING_FIELDS, mode="before")
    @classmethod
    def _strip_blank(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip() or None
        return value

    @field_validator("labeling_algorithm")
    @classmethod
    def _upper_algorithm(cls, value: Optional[str]) -> Optional[str]:
        return value.upper() if value else value

    @field_validator("labels")
    @classmethod
    def _dedupe_labels(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        seen: set[str] = set()
        out: List[str] = []
        for label in value:
            label = label.strip()
            if not label:
                raise ValueError("labels must be non-empty")
            if "," in label:
                raise ValueError(f"label '{label}' must not contain ','")
            if label not in seen:
                seen.add(label)
                out.append(label)
        return tuple(out)

    @field_validator("custom_labels", mode="before")
    @classmethod
    def _normalize_custom_labels(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            raise ValueError("expected a JSON object mapping label -> list of strings")
        normalized: Dict[str, Tuple[str, ...]] = {}
        for label, matches in value.items():
            if not isinstance(label, str) or not label.strip():
                raise ValueError("label names must be non-empty strings")
            name = label.strip()
            if name in normalized:
                raise ValueError(f"duplicate label '{name}'")
            if isinstance(matches, str):
                matches = [matches]
            if not isinstance(matches, (list, tuple)) or not all(isinstance(m, str) for m in matches):
                raise ValueError(f"values for label '{name}' must be a string or list of strings")
            normalized[name] = tuple(matches)
        return normalized

    @field_validator("custom_labels")
    @classmethod
    def _freeze_custom_labels(cls, value: Mapping[str, Tuple[str, ...]]) -> Mapping[str, Tuple[str, ...]]:
        return MappingProxyType(dict(value))

    @field_serializer("custom_labels")
    def _dump_custom_labels(self, value: Mapping[str, Tuple[str, ...]]) -> Dict[str, List[str]]:
        return {label: list(matches) for label, matches in value.items()}

    @field_validator("first_match_regex_pattern")
    @classmethod
    def _compile_pattern(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            try:
                re.compile(value)
            except re.error as exc:
                raise ValueError(f"invalid regular expression: {exc}") from exc
        return value

    @field_validator("config_file_path", "dataset_directory_path")
    @classmethod
    def _expand_user(cls, value: Optional[str]) -> Optional[str]:
        return os.path.expanduser(value) if value else value

    def __hash__(self) -> int:
        return hash(tuple(
            tuple(sorted(value.items())) if isinstance(value, Mapping) else value
            for value in self.__dict__.values()
        ))

    def as_env(self) -> Dict[str, str]:
        """
        Render back to environment form; unset and empty fields are omitted.
        load_settings(settings.as_env()) == settings for any valid settings.
        """
        env: Dict[str, str] = {}
        for name, value in self.model_dump().items():
            if value is None or value == () or value == {}:
                continue
            if name == "labels":
                env[config.LABELS] = ",".join(value)
            elif name == "custom_labels":
                env[config.CUSTOM_LABELS] = json.dumps(value, ensure_ascii=False)
            else:
                env[name.upper()] = str(value)
        return env


def _read(environ: Mapping[str, str], key: str) -> Optional[str]:
    raw = environ.get(key)
    if raw is None:
        return None
    raw = raw.strip()
    return raw or None


def _fail(key: str, message: str) -> ConfigurationError:
    logging.error(f"Invalid configuration for {key}: {message}")
    return ConfigurationError(key, message)


def _parse_thread_count(raw: Optional[str]) -> int:
    if raw is None:
        return config.DEFAULT_THREAD_COUNT
    # ASCII digits only, no "1_0"
    if not (raw.isascii() and raw.lstrip("+-").isdigit()):
        raise _fail(config.THREAD_COUNT, f"expected a positive integer, got {raw!r}")
    try:
        count = int(raw)
    except ValueError:
        raise _fail(config.THREAD_COUNT, f"expected a positive integer, got {raw!r}") from None
    if count < 1:
        raise _fail(config.THREAD_COUNT, f"expected a positive integer, got {count}")
    return count


def _parse_custom_labels(raw: Optional[str]) -> Any:
    if raw is None:
        return {}
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise _fail(config.CUSTOM_LABELS, f"invalid JSON: {exc.msg}") from exc


def load_settings(environ: Optional[Mapping[str, str]] = None) -> LabelingSettings:
    """
    Resolve labeling settings from the environment

    Args:
        environ: Mapping to read from (default: os.environ)

    Returns:
        Validated LabelingSettings

    Raises:
        ConfigurationError: naming the first offending key
    """
    if environ is None:
        environ = os.environ

    if _read(environ, config.DATASET_ID) is None:
        raise _fail(config.DATASET_ID, "required but not set")

    values: Dict[str, Any] = {}
    for key in config.ENV_KEYS:
        raw = _read(environ, key)
        if key == config.THREAD_COUNT:
            values["thread_count"] = _parse_thread_count(raw)
        elif key == config.CUSTOM_LABELS:
            values["custom_labels"] = _parse_custom_labels(raw)
        elif key == config.LABELS:
            values["labels"] = [label for label in (raw or "").split(",") if label.strip()]
        elif raw is not None:
            values[key.lower()] = raw

    try:
        settings = LabelingSettings(**values)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = str(first["loc"][0]) if first.get("loc") else "settings"
        raise _fail(field.upper(), first["msg"]) from exc

    logging.info(
        "Loaded labeling settings for dataset %s (region=%s, algorithm=%s, thread_count=%d, labels=%d)",
        settings.dataset_id,
        settings.region,
        settings.labeling_algorithm,
        settings.thread_count,
        len(settings.labels),
    )
    return settings


def service_endpoint(settings: LabelingSettings, service: str) -> Optional[str]:
    """Return the configured endpoint URL for a service identifier (DLS or OBJECT_STORAGE)."""
    if service == config.DLS:
        return settings.dls_dp_url
    if service == config.OBJECT_STORAGE:
        return settings.object_storage_url
    raise ConfigurationError("service", f"unknown service {service!r}; expected one of {', '.join(config.SERVICES)}")


def list_page_limit(requested: Optional[int] = None) -> int:
    """Cap a requested list page size at MAX_LIST_RECORDS_LIMITS."""
    if requested is None or requested < 1:
        return config.MAX_LIST_RECORDS_LIMITS
    return min(requested, config.MAX_LIST_RECORDS_LIMITS)
