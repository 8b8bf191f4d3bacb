# tests/conftest.py
from __future__ import annotations

import asyncio
import os
from collections.abc import Callable, Iterator, Sequence
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import bcrypt
import httpx
import mongomock
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pymongo.database import Database

os.environ.setdefault("ENSURE_INDEXES", "false")

from inkpress.api.dependencies import get_settings
from inkpress.core.errors import ExternalServiceError
from inkpress.core.settings import Settings, settings
from inkpress.db.session import ensure_indexes, get_db
from inkpress.main import app as fastapi_app
from inkpress.models.comment import Comment, Reply
from inkpress.models.post import Post
from inkpress.repositories import CommentRepository, PostRepository, SubscriberRepository
from inkpress.services.deliverability import MailboxLayerChecker, get_deliverability_checker
from inkpress.services.file_store import ImageStore, get_image_store
from inkpress.services.identity import new_id
from inkpress.services.mailer import get_mailer

ADMIN_PASSWORD = "correct horse battery staple"
ADMIN_PASSWORD_HASH = bcrypt.hashpw(ADMIN_PASSWORD.encode(), bcrypt.gensalt(rounds=4)).decode()
BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def _event_loop_running() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


class RecordingMailer:
    """Mailer double that records messages instead of sending them."""

    def __init__(self) -> None:
        self.sent: list[tuple[list[str], str, str]] = []
        self.fail = False
        self.on_event_loop: list[bool] = []

    def send(self, recipients: Sequence[str], subject: str, html_body: str) -> None:
        self.on_event_loop.append(_event_loop_running())
        if self.fail:
            raise ExternalServiceError("sending mail failed", field="mail")
        if recipients:
            self.sent.append((list(recipients), subject, html_body))


def verification_handler(request: httpx.Request) -> httpx.Response:
    """Fake mailboxlayer: addresses containing "bounce" fail the SMTP check."""
    email = request.url.params["email"]
    if "bounce" in email:
        return httpx.Response(200, json={"email": email, "smtp_check": False, "score": 0.32})
    return httpx.Response(200, json={"email": email, "smtp_check": True, "score": 0.8})


def build_checker(handler: Callable[[httpx.Request], httpx.Response]) -> MailboxLayerChecker:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return MailboxLayerChecker(
        client,
        url="https://apilayer.test/api/check",
        access_key="test-key",
        min_score=0.5,
    )


@pytest.fixture()
def mongo_db() -> Iterator[Database]:
    client = mongomock.MongoClient()
    db = client["inkpress-test"]
    ensure_indexes(db)
    try:
        yield db
    finally:
        client.close()


@pytest.fixture()
def test_settings(tmp_path: Path) -> Settings:
    """Provide settings with a known admin password and test URLs."""
    return settings.model_copy(
        update={
            "admin_password_hash": ADMIN_PASSWORD_HASH,
            "site_url": "http://test",
            "image_dir": tmp_path / "images",
            "strict_notifications": False,
        }
    )


@pytest.fixture()
def mailer() -> RecordingMailer:
    return RecordingMailer()


@pytest.fixture()
def checker() -> MailboxLayerChecker:
    return build_checker(verification_handler)


@pytest.fixture()
def image_store(test_settings: Settings) -> ImageStore:
    return ImageStore(test_settings.image_dir)


@pytest.fixture()
def post_repo(mongo_db: Database) -> PostRepository:
    return PostRepository(mongo_db)


@pytest.fixture()
def comment_repo(mongo_db: Database) -> CommentRepository:
    return CommentRepository(mongo_db)


@pytest.fixture()
def subscriber_repo(mongo_db: Database) -> SubscriberRepository:
    return SubscriberRepository(mongo_db)


@pytest.fixture()
def make_post(post_repo: PostRepository) -> Callable[..., Post]:
    """Return a factory inserting posts published ``minutes`` after a fixed base time."""

    def _make(minutes: int = 0, **fields: Any) -> Post:
        values: dict[str, Any] = {
            "id": new_id(),
            "title": f"Post {minutes}",
            "published": BASE_TIME + timedelta(minutes=minutes),
            "read_time": 1,
            "content": "Body text",
            "image_name": "cover.png",
        }
        values.update(fields)
        return post_repo.create(Post(**values))

    return _make


@pytest.fixture()
def test_post(make_post: Callable[..., Post]) -> Post:
    return make_post(title="Hello world", content="A first post")


@pytest.fixture()
def test_comment(comment_repo: CommentRepository, test_post: Post) -> Comment:
    return comment_repo.add_comment(
        Comment(id=new_id(), post_id=test_post.id, author="Alice", body="Great post")
    )


@pytest.fixture()
def test_reply(comment_repo: CommentRepository, test_comment: Comment) -> Reply:
    return comment_repo.add_reply(
        Reply(id=new_id(), comment_id=test_comment.id, author="Bob", body="Thanks Alice")
    )


@pytest.fixture()
def app(
    mongo_db: Database,
    test_settings: Settings,
    mailer: RecordingMailer,
    checker: MailboxLayerChecker,
    image_store: ImageStore,
) -> Iterator[FastAPI]:
    overrides: dict[Callable[..., Any], Callable[[], Any]] = {
        get_db: lambda: mongo_db,
        get_settings: lambda: test_settings,
        get_mailer: lambda: mailer,
        get_deliverability_checker: lambda: checker,
        get_image_store: lambda: image_store,
    }
    fastapi_app.dependency_overrides.update(overrides)
    try:
        yield fastapi_app
    finally:
        for dependency in overrides:
            fastapi_app.dependency_overrides.pop(dependency, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client
