from .store import Store
from .billboard import Billboard
from .category import Category
from .size import Size
from .color import Color
from .product import Product
from .image import Image
from .order import Order, OrderItem

__all__ = ['Store', 'Billboard', 'Category', 'Size', 'Color', 'Product', 'Image', 'Order', 'OrderItem']
