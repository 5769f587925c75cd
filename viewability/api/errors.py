"""Public viewability error types."""

from __future__ import annotations


class ViewabilityConfigError(ValueError):
    """Raised when a viewability configuration violates its contract."""
