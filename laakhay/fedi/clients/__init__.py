"""High-level instance clients."""

from .instance_client import InstanceClient, InstanceClientBuilder

__all__ = ["InstanceClient", "InstanceClientBuilder"]
