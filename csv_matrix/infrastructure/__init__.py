"""Infrastructure layer: file I/O and logging adapters."""
