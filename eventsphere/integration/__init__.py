"""Backend integration: single-shot transport and retrying client."""

from eventsphere.integration.api_client import ApiClient
from eventsphere.integration.transport import HttpTransport

__all__ = ["ApiClient", "HttpTransport"]
