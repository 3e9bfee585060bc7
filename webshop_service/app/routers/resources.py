from ..models import News, Newsletter, Order, Payment, Profile, Promotion, Subscription, Video
from ..schemas import (
	NewsCreate,
	NewsletterCreate,
	NewsletterOut,
	NewsletterUpdate,
	NewsOut,
	NewsUpdate,
	OrderCreate,
	OrderOut,
	OrderUpdate,
	PaymentCreate,
	PaymentOut,
	PaymentUpdate,
	ProfileCreate,
	ProfileOut,
	ProfileUpdate,
	PromotionCreate,
	PromotionOut,
	PromotionUpdate,
	SubscriptionCreate,
	SubscriptionOut,
	SubscriptionUpdate,
	VideoCreate,
	VideoOut,
	VideoUpdate,
)
from ..services import PromotionService
from .crud import make_crud_router


orders_router = make_crud_router(
	prefix="/api/orders",
	model=Order,
	out_schema=OrderOut,
	create_schema=OrderCreate,
	update_schema=OrderUpdate,
)

payments_router = make_crud_router(
	prefix="/api/payments",
	model=Payment,
	out_schema=PaymentOut,
	create_schema=PaymentCreate,
	update_schema=PaymentUpdate,
)

profiles_router = make_crud_router(
	prefix="/api/profiles",
	model=Profile,
	out_schema=ProfileOut,
	create_schema=ProfileCreate,
	update_schema=ProfileUpdate,
)

promotions_router = make_crud_router(
	prefix="/api/promotions",
	model=Promotion,
	out_schema=PromotionOut,
	create_schema=PromotionCreate,
	update_schema=PromotionUpdate,
	service_class=PromotionService,
)

subscriptions_router = make_crud_router(
	prefix="/api/subscriptions",
	model=Subscription,
	out_schema=SubscriptionOut,
	create_schema=SubscriptionCreate,
	update_schema=SubscriptionUpdate,
)

videos_router = make_crud_router(
	prefix="/api/videos",
	model=Video,
	out_schema=VideoOut,
	create_schema=VideoCreate,
	update_schema=VideoUpdate,
)

news_router = make_crud_router(
	prefix="/api/news",
	model=News,
	out_schema=NewsOut,
	create_schema=NewsCreate,
	update_schema=NewsUpdate,
)

newsletters_router = make_crud_router(
	prefix="/api/newsletters",
	model=Newsletter,
	out_schema=NewsletterOut,
	create_schema=NewsletterCreate,
	update_schema=NewsletterUpdate,
)
