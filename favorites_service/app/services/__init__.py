from .user_service import UserService, user_service
from .product_service import ProductService, product_service
from .favorite_service import FavoriteService, favorite_service

__all__ = [
    'UserService', 'user_service',
    'ProductService', 'product_service',
    'FavoriteService', 'favorite_service',
]
