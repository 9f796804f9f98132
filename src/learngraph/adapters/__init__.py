"""Adapters for the catalog endpoint, key-value caches and node stores."""
