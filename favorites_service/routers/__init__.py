from .users import router as user_router
from .products import router as product_router
from .favorites import router as favorite_router

__all__ = ['user_router', 'product_router', 'favorite_router']
