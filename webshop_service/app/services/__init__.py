from .catalog import SORT_ORDERINGS, build_catalog_query, search_courses
from .crud import CrudService, ServiceError
from .promotions import PromotionService
from .users import UserService

__all__ = [
	"SORT_ORDERINGS",
	"build_catalog_query",
	"search_courses",
	"CrudService",
	"ServiceError",
	"PromotionService",
	"UserService",
]
