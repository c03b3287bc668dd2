from .timestamp_utils import now_epoch_ms, epoch_ms_to_iso8601

__all__ = ["now_epoch_ms", "epoch_ms_to_iso8601"]
