"""Adapters connecting the resolver to build hosts."""
