"""Tests for resource module discovery."""

from importlib import import_module

from propertyops.modules import discover_modules


EXPECTED_PREFIXES = {"/maintenance_requests", "/payments", "/tenants", "/units"}


def test_discovers_every_resource_router():
    """Verify one router is mounted per resource module."""
    prefixes = {router.prefix for router in discover_modules()}

    assert prefixes == EXPECTED_PREFIXES


def test_module_info_describes_each_module():
    """Verify module metadata matches the package it lives in."""
    for prefix in EXPECTED_PREFIXES:
        name = prefix.lstrip("/")
        info = import_module(f"propertyops.modules.{name}").__module_info__

        assert info["name"] == name
        assert set(info) == {"name", "version", "description"}
