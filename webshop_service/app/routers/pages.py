from __future__ import annotations

from pathlib import Path
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..models import Category, Course, News, Order, Payment, Profile, Subscription, User, Video
from ..schemas import CatalogFilter
from ..services import search_courses
from .courses import catalog_filter_params


TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

HOME_COURSES_LIMIT = 6
HOME_NEWS_LIMIT = 3

router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)


async def _categories(db: AsyncSession) -> list[Category]:
	result = await db.execute(select(Category).order_by(Category.name))
	return list(result.scalars().all())


async def _render(request: Request, db: AsyncSession, template: str, **context: Any) -> HTMLResponse:
	context["categories"] = await _categories(db)
	return templates.TemplateResponse(request, f"{template}.html", context)


def _not_found(what: str) -> HTTPException:
	return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{what} not found")


async def _open_orders(db: AsyncSession, user_id: UUID) -> list[Order]:
	stmt = (
		select(Order)
		.where(Order.user_id == user_id, Order.order_completed == False)  # noqa: E712
		.order_by(Order.created_at)
	)
	result = await db.execute(stmt)
	return list(result.scalars().all())


async def _get_profile(db: AsyncSession, profile_id: UUID) -> Profile:
	profile = await db.get(Profile, profile_id)
	if not profile:
		raise _not_found("Profile")
	return profile


@router.get("/")
async def home(request: Request, db: AsyncSession = Depends(get_db)) -> HTMLResponse:
	courses = await db.execute(select(Course).order_by(Course.created_at.desc(), Course.name).limit(HOME_COURSES_LIMIT))
	news = await db.execute(select(News).order_by(News.created_at.desc()).limit(HOME_NEWS_LIMIT))
	return await _render(
		request,
		db,
		"index",
		courses=list(courses.scalars().all()),
		news=list(news.scalars().all()),
	)


@router.get("/login")
async def login_form(request: Request, db: AsyncSession = Depends(get_db)) -> HTMLResponse:
	return await _render(request, db, "login")


@router.get("/signup")
async def signup_form(request: Request, db: AsyncSession = Depends(get_db)) -> HTMLResponse:
	return await _render(request, db, "signup")


@router.get("/courses")
async def course_catalog(
	request: Request,
	filters: CatalogFilter = Depends(catalog_filter_params),
	db: AsyncSession = Depends(get_db),
) -> HTMLResponse:
	courses = await search_courses(db, filters)
	return await _render(request, db, "courses", courses=courses, filters=filters)


@router.get("/course/{course_id}")
async def course_page(course_id: UUID, request: Request, db: AsyncSession = Depends(get_db)) -> HTMLResponse:
	course = await db.get(Course, course_id)
	if not course:
		raise _not_found("Course")
	videos = await db.execute(select(Video).where(Video.course_id == course_id).order_by(Video.position, Video.title))
	return await _render(request, db, "course", course=course, videos=list(videos.scalars().all()))


@router.get("/course/{course_id}/{video_id}")
async def video_page(
	course_id: UUID,
	video_id: UUID,
	request: Request,
	db: AsyncSession = Depends(get_db),
) -> HTMLResponse:
	video = await db.get(Video, video_id)
	if not video or video.course_id != course_id:
		raise _not_found("Video")
	course = await db.get(Course, course_id)
	return await _render(request, db, "video", course=course, video=video)


@router.get("/news")
async def news_list(request: Request, db: AsyncSession = Depends(get_db)) -> HTMLResponse:
	news = await db.execute(select(News).order_by(News.created_at.desc()))
	return await _render(request, db, "news", news=list(news.scalars().all()))


@router.get("/news/{news_id}")
async def news_article(news_id: UUID, request: Request, db: AsyncSession = Depends(get_db)) -> HTMLResponse:
	article = await db.get(News, news_id)
	if not article:
		raise _not_found("Article")
	return await _render(request, db, "article", article=article)


@router.get("/users/{username}")
async def user_page(username: str, request: Request, db: AsyncSession = Depends(get_db)) -> HTMLResponse:
	user = await db.scalar(select(User).where(User.username == username))
	if not user:
		raise _not_found("User")
	profile = await db.scalar(select(Profile).where(Profile.user_id == user.id))
	courses: list[Course] = []
	if profile:
		stmt = (
			select(Course)
			.join(Subscription, Subscription.course_id == Course.id)
			.where(Subscription.profile_id == profile.id)
			.order_by(Course.name)
		)
		courses = list((await db.execute(stmt)).scalars().all())
	return await _render(request, db, "user", user=user, profile=profile, courses=courses)


@router.get("/users/{profile_id}/cart")
async def cart_page(profile_id: UUID, request: Request, db: AsyncSession = Depends(get_db)) -> HTMLResponse:
	profile = await _get_profile(db, profile_id)
	orders = await _open_orders(db, profile.user_id)
	return await _render(
		request,
		db,
		"cart",
		profile=profile,
		orders=orders,
		total_cents=sum(order.total_cents for order in orders),
	)


@router.get("/users/{profile_id}/payment")
async def payment_page(profile_id: UUID, request: Request, db: AsyncSession = Depends(get_db)) -> HTMLResponse:
	profile = await _get_profile(db, profile_id)
	orders = await _open_orders(db, profile.user_id)
	payments = await db.execute(
		select(Payment).where(Payment.user_id == profile.user_id).order_by(Payment.created_at.desc())
	)
	return await _render(
		request,
		db,
		"payment",
		profile=profile,
		orders=orders,
		total_cents=sum(order.total_cents for order in orders),
		payments=list(payments.scalars().all()),
	)


@router.get("/legal/terms")
async def terms_and_conditions(request: Request, db: AsyncSession = Depends(get_db)) -> HTMLResponse:
	return await _render(request, db, "terms_and_conditions")


@router.get("/legal/privacy")
async def privacy_policy(request: Request, db: AsyncSession = Depends(get_db)) -> HTMLResponse:
	return await _render(request, db, "privacy_policy")
