"""Static vocabularies used when building Klara API requests."""

from .delivery_product import DeliveryProduct

__all__ = ["DeliveryProduct"]
