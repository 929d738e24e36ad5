class StoreError(Exception):
    """Failure reported by the relational engine, carrying only its message."""
    pass
