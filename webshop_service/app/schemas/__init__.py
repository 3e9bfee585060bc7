from .auth import LoginInput, Token
from .catalog import CatalogFilter
from .category import CategoryCreate, CategoryOut, CategoryUpdate
from .course import CourseCreate, CourseOut, CourseUpdate
from .news import NewsCreate, NewsletterCreate, NewsletterOut, NewsletterUpdate, NewsOut, NewsUpdate
from .order import OrderCreate, OrderOut, OrderUpdate
from .payment import PaymentCreate, PaymentOut, PaymentUpdate
from .profile import ProfileCreate, ProfileOut, ProfileUpdate
from .promotion import PromotionCreate, PromotionOut, PromotionUpdate
from .subscription import SubscriptionCreate, SubscriptionOut, SubscriptionUpdate
from .user import AdminUserUpdate, UserCreate, UserOut, UserUpdate
from .video import VideoCreate, VideoOut, VideoUpdate

__all__ = [
	"LoginInput",
	"Token",
	"CatalogFilter",
	"CategoryCreate",
	"CategoryOut",
	"CategoryUpdate",
	"CourseCreate",
	"CourseOut",
	"CourseUpdate",
	"NewsCreate",
	"NewsOut",
	"NewsUpdate",
	"NewsletterCreate",
	"NewsletterOut",
	"NewsletterUpdate",
	"OrderCreate",
	"OrderOut",
	"OrderUpdate",
	"PaymentCreate",
	"PaymentOut",
	"PaymentUpdate",
	"ProfileCreate",
	"ProfileOut",
	"ProfileUpdate",
	"PromotionCreate",
	"PromotionOut",
	"PromotionUpdate",
	"SubscriptionCreate",
	"SubscriptionOut",
	"SubscriptionUpdate",
	"AdminUserUpdate",
	"UserCreate",
	"UserOut",
	"UserUpdate",
	"VideoCreate",
	"VideoOut",
	"VideoUpdate",
]
