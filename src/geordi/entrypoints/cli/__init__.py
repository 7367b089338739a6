"""GEORDI command-line interface."""
