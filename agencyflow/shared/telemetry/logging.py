"""Logging configuration: stdout, one line per record, tagged with the request tenant."""

import logging
import sys

from agencyflow.core.config import get_settings
from agencyflow.core.tenant_context import get_tenant_id

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [tenant=%(tenant_id)s] %(message)s"


class TenantLogFilter(logging.Filter):
    """Stamp every record with the tenant of the request being served ("-" outside requests)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.tenant_id = get_tenant_id() or "-"
        return True


def setup_logging() -> None:
    """Configure the root logger once at startup.

    DEBUG when settings.debug, otherwise INFO. SQL statement logging stays at
    WARNING unless database_echo is on.
    """
    settings = get_settings()
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(TenantLogFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        handlers=[handler],
        force=True,
    )
    if not settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
