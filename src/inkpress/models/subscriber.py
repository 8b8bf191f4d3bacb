# src/inkpress/models/subscriber.py
"""Mailing list subscriber model."""

from pydantic import BaseModel, ConfigDict


class Subscriber(BaseModel):
    """An email address notified on new posts. Collection name: "subscribers"."""

    id: str
    mail: str

    model_config = ConfigDict(extra="ignore")
