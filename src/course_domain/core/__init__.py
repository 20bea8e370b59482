"""Cross-cutting primitives: errors, clocks, ids, configuration."""
