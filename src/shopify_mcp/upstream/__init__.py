"""Upstream access: the executor capability and the Shopify client."""

from .executor import GraphQLExecutor
from .client import ShopifyGraphQLClient

__all__ = ["GraphQLExecutor", "ShopifyGraphQLClient"]
