"""Repository modules grouped by entity (villains)."""
