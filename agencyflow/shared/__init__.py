"""Cross-cutting helpers (ids, UTC time, logging). No business logic."""

from agencyflow.shared.utils import ensure_utc, generate_cuid, utc_now

__all__ = ["ensure_utc", "generate_cuid", "utc_now"]
