from user_settings.infrastructure.log.log_adapter import StdLoggerAdapter, start_queue_logging

__all__ = ["StdLoggerAdapter", "start_queue_logging"]
