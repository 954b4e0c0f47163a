from __future__ import annotations

import logging
from decimal import Decimal
from enum import StrEnum
from typing import Literal, NewType

from pydantic import BaseModel, Field, PrivateAttr, model_validator

from utils.formatting import format_flag

logger = logging.getLogger(__name__)

Imei = NewType("Imei", int)

PHONE_5G_MARKUP = Decimal("1.40")
PHONE_MARKUP = Decimal("1.30")
TABLET_MARKUP = Decimal("1.30")


class DeviceKind(StrEnum):
    PHONE = "PHONE"
    TABLET = "TABLET"


class Device(BaseModel):
    """An electronic device held by the shop.

    Identity and pricing fields are frozen. ``sold`` is read-only and only
    changes through ``mark_sold``, from False to True.
    """

    imei: Imei = Field(frozen=True)
    pledge_price: int = Field(frozen=True)
    manufacturer: str = Field(frozen=True)
    allowed_for_sale: bool = Field(frozen=True)

    _sold: bool = PrivateAttr(default=False)

    @model_validator(mode="after")
    def _validate_pledge_price(self) -> Device:
        if self.pledge_price < 0:
            raise ValueError("pledge_price must be >= 0")
        return self

    @property
    def sold(self) -> bool:
        return self._sold

    def describe(self) -> str:
        lines = [
            f"IMEI: {self.imei}",
            f"Manufacturer: {self.manufacturer}",
            f"Price of Pledge: {self.pledge_price}",
            f"Allowed for Sale: {format_flag(self.allowed_for_sale)}",
            f"Sold: {format_flag(self.sold)}",
        ]
        match self:
            case MobilePhone():
                lines.append(f"Supports 5G Network: {format_flag(self.supports_5g)}")
            case Tablet():
                lines.append(f"Can Make Phone Calls: {format_flag(self.can_make_calls)}")
        return "\n".join(lines)

    def selling_price(self) -> Decimal:
        match self:
            case MobilePhone(supports_5g=True):
                markup = PHONE_5G_MARKUP
            case MobilePhone():
                markup = PHONE_MARKUP
            case Tablet():
                markup = TABLET_MARKUP
            case _:
                return Decimal(self.pledge_price)
        return self.pledge_price * markup

    def mark_sold(self) -> bool:
        """Flag the device as sold. Returns False if it is not allowed for sale."""
        if not self.allowed_for_sale:
            logger.warning("Device is not allowed for sale: imei=%s", self.imei)
            return False
        self._sold = True
        return True


class MobilePhone(Device):
    kind: Literal[DeviceKind.PHONE] = Field(default=DeviceKind.PHONE, frozen=True)
    supports_5g: bool = Field(frozen=True)


class Tablet(Device):
    kind: Literal[DeviceKind.TABLET] = Field(default=DeviceKind.TABLET, frozen=True)
    can_make_calls: bool = Field(frozen=True)
