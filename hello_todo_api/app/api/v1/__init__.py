"""
Version 1 of the API.

Bundles the hello, todos and big endpoints.
"""
