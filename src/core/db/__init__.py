"""
DynamoDB item helpers for DreamBody.

Every accessor talks to the low-level DynamoDB client; these helpers convert
between plain records and attribute-value maps.
"""

from core.db.items import build_update_expression, from_item, to_item

__all__ = ["build_update_expression", "from_item", "to_item"]
