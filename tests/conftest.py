"""Global pytest configuration for GEORDI."""

pytest_plugins = ["geordi.pytest_plugin"]
