"""Storage clients."""
