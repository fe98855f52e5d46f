"""
Byte count formatting and size-bucket classification.
"""
from enum import Enum
from typing import Optional

from . import config


class SizeBucket(Enum):
    HUGE = ">= 1 GB"
    LARGE = "500 MB - 1 GB"
    MEDIUM = "100 MB - 500 MB"


def format_size(num_bytes: int) -> str:
    """
    Human readable size, base 1024, two decimals.
    Bytes are shown without a decimal point: format_size(0) == "0 B".
    """
    if num_bytes >= config.TB:
        return f"{num_bytes / config.TB:.2f} TB"
    if num_bytes >= config.GB:
        return f"{num_bytes / config.GB:.2f} GB"
    if num_bytes >= config.MB:
        return f"{num_bytes / config.MB:.2f} MB"
    if num_bytes >= config.KB:
        return f"{num_bytes / config.KB:.2f} KB"
    return f"{num_bytes} B"


def megabytes_to_bytes(megabytes: int) -> int:
    return megabytes * config.MB


def is_huge(size: int) -> bool:
    return size >= config.HUGE_FILE_BYTES


def is_large(size: int) -> bool:
    return config.LARGE_FILE_BYTES <= size < config.HUGE_FILE_BYTES


def is_medium(size: int) -> bool:
    return config.MEDIUM_FILE_BYTES <= size < config.LARGE_FILE_BYTES


def classify_size(size: int) -> Optional[SizeBucket]:
    """Returns the bucket for size, or None below the smallest bucket."""
    if is_huge(size):
        return SizeBucket.HUGE
    if is_large(size):
        return SizeBucket.LARGE
    if is_medium(size):
        return SizeBucket.MEDIUM
    return None
