"""Coordinators - glue between the dictionary lookup and the activity store."""

from .lookup_coordinator import LookupCoordinator

__all__ = ["LookupCoordinator"]
