"""Repository modules."""
