"""
Mapping between service ids and Marathon application ids.

Service ids are dot-separated (``shop.orders``); Marathon ids are absolute
slash-separated paths (``/shop/orders``). Empty strings pass through.
"""

from __future__ import annotations


def to_marathon_id(service_id: str) -> str:
    """Convert a service id to a Marathon application id."""
    if not service_id:
        return service_id

    marathon_id = service_id.replace(".", "/")
    if not marathon_id.startswith("/"):
        marathon_id = "/" + marathon_id
    return marathon_id


def to_service_id(marathon_id: str) -> str:
    """Convert a Marathon application id to a service id."""
    if marathon_id.startswith("/"):
        marathon_id = marathon_id[1:]
    return marathon_id.replace("/", ".")


class ServiceIdConverter:
    """Namespace for the id conversions, for callers that inject it."""

    to_marathon_id = staticmethod(to_marathon_id)
    to_service_id = staticmethod(to_service_id)
