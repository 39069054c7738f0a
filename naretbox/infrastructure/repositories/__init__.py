"""Repository implementations not backed by SQL."""
