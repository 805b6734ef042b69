"""Infrastructure adapters: storage, configuration, clock and logging."""
