from __future__ import annotations

import logging

from pydantic import BaseModel

from .device import Device, Imei

logger = logging.getLogger(__name__)


class InventorySummary(BaseModel):
    available_count: int
    sold_count: int
    balance: int


class PawnShop:
    """In-memory inventory of pledged devices with a running cash balance.

    The balance is a plain accumulator: pledge prices paid out and selling
    prices received are both added to it. Releasing a device does not refund
    its pledge.
    """

    def __init__(self) -> None:
        self._devices: list[Device] = []
        self._balance = 0

    @property
    def balance(self) -> int:
        return self._balance

    def pledge(self, device: Device) -> None:
        self._balance += device.pledge_price
        self._devices.append(device)
        logger.info("Pledged imei=%s for %s", device.imei, device.pledge_price)

    def sell(self, imei: Imei) -> bool:
        """Sell the first unsold device with the given IMEI, in pledge order."""
        device = next((d for d in self._devices if d.imei == imei and not d.sold), None)
        if device is None:
            logger.info("No unsold device with imei=%s", imei)
            return False

        price = device.selling_price()
        if not device.mark_sold():
            return False
        # Balance is integral; fractional cents are dropped.
        self._balance += int(price)
        logger.info("Sold imei=%s for %s", imei, price)
        return True

    def release(self, imei: Imei) -> bool:
        """Remove every unsold device with the given IMEI."""
        kept = [d for d in self._devices if d.imei != imei or d.sold]
        removed = len(self._devices) - len(kept)
        if not removed:
            return False
        self._devices = kept
        logger.info("Released %d device(s) with imei=%s", removed, imei)
        return True

    def available_devices(self) -> list[Device]:
        return [d for d in self._devices if not d.sold]

    def sold_devices(self) -> list[Device]:
        return [d for d in self._devices if d.sold]

    def show_available(self) -> str:
        return "\n".join(d.describe() for d in self.available_devices())

    def show_sold(self) -> str:
        return "\n".join(d.describe() for d in self.sold_devices())

    def summary(self) -> InventorySummary:
        return InventorySummary(
            available_count=len(self.available_devices()),
            sold_count=len(self.sold_devices()),
            balance=self._balance,
        )
