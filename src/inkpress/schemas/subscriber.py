# src/inkpress/schemas/subscriber.py
"""Subscription form schema."""

from pydantic import BaseModel, Field


class SubscribeForm(BaseModel):
    """Newsletter sign-up field shared by the list and about pages."""

    email: str = Field("", alias="semail1")
