"""Configuration module for the workflows SDK."""

from .client_settings import WorkflowClientSettings

__all__ = [
    "WorkflowClientSettings",
]
