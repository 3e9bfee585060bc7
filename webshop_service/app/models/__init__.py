from .category import Category
from .course import Course, DifficultyLevelEnum
from .news import News, Newsletter
from .order import Order
from .payment import Payment, PaymentStatusEnum
from .profile import Profile
from .promotion import Promotion
from .subscription import Subscription
from .user import User, UserRoleEnum
from .video import Video

__all__ = [
	"Category",
	"Course",
	"DifficultyLevelEnum",
	"News",
	"Newsletter",
	"Order",
	"Payment",
	"PaymentStatusEnum",
	"Profile",
	"Promotion",
	"Subscription",
	"User",
	"UserRoleEnum",
	"Video",
]
