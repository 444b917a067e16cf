"""Audit API."""

from web.api.audit.views import get_events

__all__ = ["get_events"]
