"""Core harness model: property bag, test slice, results and scenarios."""
