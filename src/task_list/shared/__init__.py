"""
Cross-cutting utilities shared by the repository, service and API layers.
"""

from .utils import now_epoch_ms, epoch_ms_to_iso8601

__all__ = ["now_epoch_ms", "epoch_ms_to_iso8601"]
