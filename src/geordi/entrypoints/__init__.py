"""Entry points for GEORDI (command line)."""
