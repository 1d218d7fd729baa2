# Global configuration constants for bulk labeling

# Upper bound on records requested per list page
MAX_LIST_RECORDS_LIMITS = 1000

# Default size of the labeling worker pool
DEFAULT_THREAD_COUNT = 30

# Environment variable keys
CONFIG_FILE_PATH = "CONFIG_FILE_PATH"
CONFIG_PROFILE = "CONFIG_PROFILE"
DLS_DP_URL = "DLS_DP_URL"
OBJECT_STORAGE_URL = "OBJECT_STORAGE_URL"
DATASET_ID = "DATASET_ID"
REGION = "REGION"
LABELING_ALGORITHM = "LABELING_ALGORITHM"
THREAD_COUNT = "THREAD_COUNT"
LABELS = "LABELS"
CUSTOM_LABELS = "CUSTOM_LABELS"
FIRST_MATCH_REGEX_PATTERN = "FIRST_MATCH_REGEX_PATTERN"
OBJECT_STORAGE_BUCKET_NAME = "OBJECT_STORAGE_BUCKET_NAME"
OBJECT_STORAGE_NAMESPACE = "OBJECT_STORAGE_NAMESPACE"
DATASET_DIRECTORY_PATH = "DATASET_DIRECTORY_PATH"
TENANT = "TENANT"

# Service identifiers
DLS = "DLS"
OBJECT_STORAGE = "OBJECT_STORAGE"

ENV_KEYS = (
    CONFIG_FILE_PATH,
    CONFIG_PROFILE,
    DLS_DP_URL,
    OBJECT_STORAGE_URL,
    DATASET_ID,
    REGION,
    LABELING_ALGORITHM,
    THREAD_COUNT,
    LABELS,
    CUSTOM_LABELS,
    FIRST_MATCH_REGEX_PATTERN,
    OBJECT_STORAGE_BUCKET_NAME,
    OBJECT_STORAGE_NAMESPACE,
    DATASET_DIRECTORY_PATH,
    TENANT,
)

SERVICES = (DLS, OBJECT_STORAGE)
