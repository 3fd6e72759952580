"""Use cases: work item workflow, clients, calendar and notification operations."""
