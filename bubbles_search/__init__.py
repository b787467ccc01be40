"""Bubbles search: federated search service for the horror-fiction platform."""
