"""Fetch, decode and render a product feed."""
