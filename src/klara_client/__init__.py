"""Klara API client.

Asynchronous client for the Klara HTTP API with bearer-token
authentication, path/query parameter handling, and the delivery-product
vocabulary used when sending letters.
"""

__version__ = "0.1.0"
