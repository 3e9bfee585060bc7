from .auth import router as auth_router
from .categories import router as categories_router
from .courses import router as courses_router
from .pages import router as pages_router
from .resources import (
	news_router,
	newsletters_router,
	orders_router,
	payments_router,
	profiles_router,
	promotions_router,
	subscriptions_router,
	videos_router,
)
from .users import admin_router as admin_users_router
from .users import router as users_router

api_routers = [
	auth_router,
	categories_router,
	courses_router,
	newsletters_router,
	news_router,
	orders_router,
	payments_router,
	profiles_router,
	promotions_router,
	subscriptions_router,
	users_router,
	admin_users_router,
	videos_router,
]

__all__ = ["api_routers", "pages_router"]
