"""
Database Models - SQLAlchemy ORM 모델
"""

from src.adapters.database.models.base import (
    Address,
    BaseModel,
    BigIntPK,
    TimestampMixin,
    is_loaded,
)
from src.adapters.database.models.delivery import DeliveryModel, DeliveryStatus
from src.adapters.database.models.item import ItemModel
from src.adapters.database.models.member import MemberModel
from src.adapters.database.models.order import OrderItemModel, OrderModel, OrderStatus

__all__ = [
    # Base
    "BaseModel",
    "TimestampMixin",
    "BigIntPK",
    "Address",
    "is_loaded",
    # Member
    "MemberModel",
    # Item
    "ItemModel",
    # Delivery
    "DeliveryModel",
    "DeliveryStatus",
    # Order
    "OrderModel",
    "OrderItemModel",
    "OrderStatus",
]
