"""Cross-cutting infrastructure: configuration, logging and failures."""
