"""Infrastructure layer: directory traversal, file I/O, and standard loading."""
