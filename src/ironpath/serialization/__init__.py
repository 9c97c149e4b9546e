"""Serialization module — export the top-set log to JSON and CSV."""

from ironpath.serialization.log_export import (
    log_from_csv,
    log_from_json,
    log_to_csv,
    log_to_json,
)

__all__ = ["log_from_csv", "log_from_json", "log_to_csv", "log_to_json"]
