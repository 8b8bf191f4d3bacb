"""Shared API dependencies wiring repositories and services together."""

from typing import Annotated

from fastapi import Depends
from pymongo.database import Database

from inkpress.core.settings import Settings, settings
from inkpress.db.session import get_db
from inkpress.repositories import CommentRepository, PostRepository, SubscriberRepository
from inkpress.services.comment_service import CommentService
from inkpress.services.deliverability import DeliverabilityChecker, get_deliverability_checker
from inkpress.services.file_store import ImageStore, get_image_store
from inkpress.services.mailer import Mailer, get_mailer
from inkpress.services.pagination import Paginator
from inkpress.services.post_service import PostService
from inkpress.services.subscriber_service import SubscriberService


def get_settings() -> Settings:
    """Return the active application settings."""
    return settings


DatabaseDep = Annotated[Database, Depends(get_db)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
MailerDep = Annotated[Mailer, Depends(get_mailer)]
CheckerDep = Annotated[DeliverabilityChecker, Depends(get_deliverability_checker)]
ImageStoreDep = Annotated[ImageStore, Depends(get_image_store)]


def get_paginator(db: DatabaseDep, config: SettingsDep) -> Paginator:
    return Paginator(PostRepository(db), CommentRepository(db), page_size=config.page_size)


def get_post_service(
    db: DatabaseDep,
    config: SettingsDep,
    mailer: MailerDep,
    image_store: ImageStoreDep,
) -> PostService:
    return PostService(
        posts=PostRepository(db),
        comments=CommentRepository(db),
        subscribers=SubscriberRepository(db),
        mailer=mailer,
        image_store=image_store,
        admin_password_hash=config.admin_password_hash,
        site_name=config.app_name,
        site_url=config.site_url,
        strict_notifications=config.strict_notifications,
    )


def get_comment_service(db: DatabaseDep) -> CommentService:
    return CommentService(posts=PostRepository(db), comments=CommentRepository(db))


def get_subscriber_service(
    db: DatabaseDep,
    config: SettingsDep,
    checker: CheckerDep,
    mailer: MailerDep,
) -> SubscriberService:
    return SubscriberService(
        subscribers=SubscriberRepository(db),
        checker=checker,
        mailer=mailer,
        site_name=config.app_name,
        site_url=config.site_url,
    )


PaginatorDep = Annotated[Paginator, Depends(get_paginator)]
PostServiceDep = Annotated[PostService, Depends(get_post_service)]
CommentServiceDep = Annotated[CommentService, Depends(get_comment_service)]
SubscriberServiceDep = Annotated[SubscriberService, Depends(get_subscriber_service)]
