from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from domain.device import Imei, MobilePhone, Tablet
from domain.pawn_shop import PawnShop


class Action(StrEnum):
    PLEDGE_PHONE = "PLEDGE_PHONE"
    PLEDGE_TABLET = "PLEDGE_TABLET"
    SELL = "SELL"
    RELEASE = "RELEASE"
    SHOW_AVAILABLE = "SHOW_AVAILABLE"
    SHOW_SOLD = "SHOW_SOLD"
    SHOW_BALANCE = "SHOW_BALANCE"
    EXIT = "EXIT"


class PledgePhone(BaseModel):
    action: Literal[Action.PLEDGE_PHONE] = Action.PLEDGE_PHONE
    imei: Imei
    price: int = Field(ge=0)
    manufacturer: str
    for_sale: bool
    supports_5g: bool


class PledgeTablet(BaseModel):
    action: Literal[Action.PLEDGE_TABLET] = Action.PLEDGE_TABLET
    imei: Imei
    price: int = Field(ge=0)
    manufacturer: str
    for_sale: bool
    can_make_calls: bool


class Sell(BaseModel):
    action: Literal[Action.SELL] = Action.SELL
    imei: Imei


class Release(BaseModel):
    action: Literal[Action.RELEASE] = Action.RELEASE
    imei: Imei


class ShowAvailable(BaseModel):
    action: Literal[Action.SHOW_AVAILABLE] = Action.SHOW_AVAILABLE


class ShowSold(BaseModel):
    action: Literal[Action.SHOW_SOLD] = Action.SHOW_SOLD


class ShowBalance(BaseModel):
    action: Literal[Action.SHOW_BALANCE] = Action.SHOW_BALANCE


class Exit(BaseModel):
    action: Literal[Action.EXIT] = Action.EXIT


Command = Annotated[
    PledgePhone | PledgeTablet | Sell | Release | ShowAvailable | ShowSold | ShowBalance | Exit,
    Field(discriminator="action"),
]


class CommandResult(BaseModel):
    ok: bool
    message: str
    done: bool = False


def dispatch(shop: PawnShop, command: Command, *, shop_name: str = "PawnShop Manager") -> CommandResult:
    """Apply a single validated command to the shop."""
    match command:
        case PledgePhone():
            shop.pledge(
                MobilePhone(
                    imei=command.imei,
                    pledge_price=command.price,
                    manufacturer=command.manufacturer,
                    allowed_for_sale=command.for_sale,
                    supports_5g=command.supports_5g,
                )
            )
            return CommandResult(ok=True, message="Mobile phone added successfully.")
        case PledgeTablet():
            shop.pledge(
                Tablet(
                    imei=command.imei,
                    pledge_price=command.price,
                    manufacturer=command.manufacturer,
                    allowed_for_sale=command.for_sale,
                    can_make_calls=command.can_make_calls,
                )
            )
            return CommandResult(ok=True, message="Tablet added successfully.")
        case Sell():
            if shop.sell(command.imei):
                return CommandResult(ok=True, message="Device sold.")
            return CommandResult(ok=False, message="Device could not be sold (not found or already sold).")
        case Release():
            if shop.release(command.imei):
                return CommandResult(ok=True, message="Device released.")
            return CommandResult(ok=False, message="Device could not be released (not found or already sold).")
        case ShowAvailable():
            return CommandResult(ok=True, message=f"Available Devices:\n{shop.show_available()}")
        case ShowSold():
            return CommandResult(ok=True, message=f"Sold Devices:\n{shop.show_sold()}")
        case ShowBalance():
            summary = shop.summary()
            message = (
                f"Account balance: {summary.balance}\n"
                f"Available devices: {summary.available_count}\n"
                f"Sold devices: {summary.sold_count}"
            )
            return CommandResult(ok=True, message=message)
        case Exit():
            return CommandResult(ok=True, message=f"Thank you for using {shop_name}. Goodbye!", done=True)
    raise ValueError(f"Unsupported command: {command!r}")
