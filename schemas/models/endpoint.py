"""Monitored endpoint descriptor as handed over by the health-check engine."""

from __future__ import annotations

from schemas.models.base import ConfigModel


class Endpoint(ConfigModel):
    """
    A monitored target.

    group is used to pick a per-group webhook override; an empty group only
    ever matches the default webhook.
    """

    name: str
    group: str = ""
    url: str = ""
