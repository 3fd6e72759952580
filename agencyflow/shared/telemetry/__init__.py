from agencyflow.shared.telemetry.logging import TenantLogFilter, get_logger, setup_logging

__all__ = ["TenantLogFilter", "get_logger", "setup_logging"]
