#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from app.data.models.book import BookModel
from app.data.models.order import OrderModel, OrderItemModel

__all__ = ["BookModel", "OrderModel", "OrderItemModel"]
