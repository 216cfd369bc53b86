"""PriceChange: an append-only record of a single price edit."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from fox_shop.domain.model.value_objects import Price


def format_timestamp(moment: datetime) -> str:
    """Render a UTC instant as ``2025-02-10T00:23:05.681Z``."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(text: str) -> datetime:
    """Inverse of :func:`format_timestamp`; naive input is taken as UTC."""
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    moment = datetime.fromisoformat(text)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


@dataclass(frozen=True)
class PriceChange:
    """Never mutated or deleted once written.

    ``product_id`` is a plain reference: records outlive the product
    they describe.
    """

    product_id: int
    product_name: str
    previous_price: Price
    new_price: Price
    changed_at: datetime

    @property
    def changed_at_label(self) -> str:
        return format_timestamp(self.changed_at)
