"""Mailing list registration."""
from __future__ import annotations

import logging

from pymongo.errors import DuplicateKeyError

from inkpress.core.errors import DuplicateSubmissionError, ValidationFailedError
from inkpress.models.subscriber import Subscriber
from inkpress.repositories.subscriber_repo import SubscriberRepository
from inkpress.services.deliverability import DeliverabilityChecker
from inkpress.services.identity import new_id
from inkpress.services.mailer import Mailer, welcome_message
from inkpress.services.validation import EMAIL, FieldCheck, validate_fields

logger = logging.getLogger(__name__)


class SubscriberService:
    """Register verified, unique email addresses."""

    def __init__(
        self,
        *,
        subscribers: SubscriberRepository,
        checker: DeliverabilityChecker,
        mailer: Mailer,
        site_name: str,
        site_url: str,
    ) -> None:
        self._subscribers = subscribers
        self._checker = checker
        self._mailer = mailer
        self._site_name = site_name
        self._site_url = site_url

    def subscribe(self, email: str) -> Subscriber:
        """Add ``email`` to the mailing list and send a welcome mail.

        Raises:
            ValidationFailedError: If the address is malformed or not deliverable.
            DuplicateSubmissionError: If the address is already subscribed.
            ExternalServiceError: If verification or the welcome mail fails.
        """
        validate_fields([FieldCheck("semail1", email, EMAIL, "Invalid email address")])

        if not self._checker.is_deliverable(email):
            raise ValidationFailedError("Unregistered email address", field="semail1")

        if self._subscribers.exists(email):
            raise DuplicateSubmissionError("You are already a subscriber", field="semail1")

        subject, body = welcome_message(self._site_name, self._site_url)
        self._mailer.send([email], subject, body)

        subscriber = Subscriber(id=new_id(), mail=email)
        try:
            self._subscribers.create(subscriber)
        except DuplicateKeyError as err:
            raise DuplicateSubmissionError("You are already a subscriber", field="semail1") from err
        logger.info("Registered subscriber %s", subscriber.id)
        return subscriber
