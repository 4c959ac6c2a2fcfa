"""
Recipe browser core.

Headless building blocks for the recipe browsing page: the filter model and
its URL query encoding, the filter state store, the browser history bridge,
the pagination presenter, and the HTTP client for the recipe service.
"""
