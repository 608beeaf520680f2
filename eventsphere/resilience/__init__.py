"""Resilience components for the EventSphere client."""

from eventsphere.resilience.retry_policy import RetryPolicy

__all__ = ["RetryPolicy"]
