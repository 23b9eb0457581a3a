"""Integration tests against the in-process fake news service.

Exercises the real NewsApiClient and SessionController over HTTP.
"""
