"""Infrastructure adapters: filesystem, Ghostscript and logging."""
