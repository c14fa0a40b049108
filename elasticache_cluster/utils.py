"""Utility functions for the ElastiCache cluster lookup CLI."""

import logging
from pathlib import Path
from typing import List

from elasticache_cluster.aws.models import ATTRIBUTE_NAMES

# Field name mapping: CLI parameter (hyphen) -> attribute name (underscore)
FIELD_MAPPING = {name.replace("_", "-"): name for name in ATTRIBUTE_NAMES}

VALID_FIELDS = list(FIELD_MAPPING)

VALID_OUTPUT_FORMATS = ["json", "csv", "markdown"]


def normalize_cluster_id(cluster_id: str) -> str:
    """Normalize a cache cluster identifier.

    ElastiCache stores cluster identifiers in lowercase.

    Args:
        cluster_id: Identifier as supplied by the user

    Returns:
        Stripped, lowercase identifier
    """
    return cluster_id.strip().lower()


def ensure_output_dir(path: str) -> str:
    """Ensure the parent directory of an output file exists.

    Args:
        path: Output file path

    Returns:
        Absolute path with parent directory created
    """
    path_obj = Path(path)
    path_obj.parent.mkdir(parents=True, exist_ok=True)
    return str(path_obj.absolute())


def parse_info_types(info_type_str: str) -> List[str]:
    """Parse info-type parameter string.

    Both hyphen and underscore spellings are accepted.

    Args:
        info_type_str: Comma-separated attribute names or "all"

    Returns:
        List of attribute names (with underscores)

    Raises:
        ValueError: If invalid field names are provided
    """
    if info_type_str.lower() == "all":
        return list(ATTRIBUTE_NAMES)

    requested_fields = [f.strip().lower().replace("_", "-") for f in info_type_str.split(",")]
    invalid_fields = [f for f in requested_fields if f not in FIELD_MAPPING]

    if invalid_fields:
        raise ValueError(
            f"無效的欄位名稱：{', '.join(invalid_fields)}。\n"
            f"有效欄位：{', '.join(VALID_FIELDS)}"
        )

    return [FIELD_MAPPING[f] for f in requested_fields]


def setup_logger(verbose: bool = False) -> logging.Logger:
    """Setup logger with appropriate level.

    Args:
        verbose: Enable DEBUG level logging

    Returns:
        Configured logger
    """
    logger = logging.getLogger("elasticache_cluster")

    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # Console handler (stderr) so stdout stays clean for formatted output
    handler = logging.StreamHandler()
    handler.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    return logger
