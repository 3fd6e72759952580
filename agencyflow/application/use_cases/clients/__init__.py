"""Client use cases: list, get, create."""

from agencyflow.application.use_cases.clients.client_operations import ClientService

__all__ = ["ClientService"]
