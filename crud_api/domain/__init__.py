"""Domain shapes (create/update inputs, read model, list filters)."""
