"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("TERMCOUNT_DB_PATH", "termcount.duckdb")

# Logging
LOG_DIR = Path(os.getenv("TERMCOUNT_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("TERMCOUNT_LOG_LEVEL", "INFO")
LOG_FILE_LEVEL = os.getenv("TERMCOUNT_LOG_FILE_LEVEL", "DEBUG")

# Term meta keys
COUNTED_TYPES_META_KEY = "_counted_object_types"
OBJECT_COUNT_META_PREFIX = "_object_count_"

# Registered at container startup: {object_type: supports_counting}
DEFAULT_OBJECT_TYPES = {
    "post": True,
    "page": True,
    "attachment": True,
    "user": False,
}

# Registered at container startup: {taxonomy: [object_type, ...]}
DEFAULT_TAXONOMIES = {
    "category": ["post"],
    "post_tag": ["post"],
}
