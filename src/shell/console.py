from __future__ import annotations

import logging
from typing import Callable

from pydantic import ValidationError

from domain.pawn_shop import PawnShop

from .commands import (
    Command,
    CommandResult,
    Exit,
    PledgePhone,
    PledgeTablet,
    Release,
    Sell,
    ShowAvailable,
    ShowBalance,
    ShowSold,
    dispatch,
)

logger = logging.getLogger(__name__)

MENU_OPTIONS = (
    "Add a Mobile Phone",
    "Add a Tablet",
    "Sell a Device",
    "Release a Device",
    "Show Available Devices",
    "Show Sold Devices",
    "Show Account Balance",
    "Exit",
)

TRUE_VALUES = frozenset({"1", "y", "yes", "true"})
FALSE_VALUES = frozenset({"0", "n", "no", "false"})


class CommandError(Exception):
    def __init__(self, message: str, *, field: str, raw_value: str | None = None) -> None:
        super().__init__(message)
        self.field = field
        self.raw_value = raw_value


class Console:
    """Interactive menu around a PawnShop.

    All parsing of raw text happens here; the shop only ever sees validated
    commands.
    """

    def __init__(
        self,
        shop: PawnShop,
        *,
        shop_name: str = "PawnShop Manager",
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        self._shop = shop
        self._shop_name = shop_name
        self._input = input_fn
        self._output = output

    def run(self) -> None:
        while True:
            self._print_menu()
            try:
                command = self.read_command()
            except EOFError:
                command = Exit()
            except CommandError as err:
                logger.debug("Rejected input for %s: %r", err.field, err.raw_value)
                self._output("Invalid input, please try again.")
                continue

            if command is None:
                self._output("Invalid choice. Please try again.")
                continue

            result = self.execute(command)
            if result.done:
                break

    def execute(self, command: Command) -> CommandResult:
        result = dispatch(self._shop, command, shop_name=self._shop_name)
        self._output(result.message)
        return result

    def read_command(self) -> Command | None:
        """Prompt for a menu choice and its arguments. Returns None for an unknown choice."""
        choice = self._read_int("Enter your choice: ", field="choice")
        try:
            match choice:
                case 1:
                    return PledgePhone(
                        **self._read_pledge_fields(),
                        supports_5g=self._read_flag("Enter Supports 5G (1 for Yes, 0 for No): ", field="supports_5g"),
                    )
                case 2:
                    return PledgeTablet(
                        **self._read_pledge_fields(),
                        can_make_calls=self._read_flag(
                            "Enter Can Make Phone Calls (1 for Yes, 0 for No): ", field="can_make_calls"
                        ),
                    )
                case 3:
                    return Sell(imei=self._read_int("Enter IMEI of device to sell: ", field="imei"))
                case 4:
                    return Release(imei=self._read_int("Enter IMEI of device to release: ", field="imei"))
                case 5:
                    return ShowAvailable()
                case 6:
                    return ShowSold()
                case 7:
                    return ShowBalance()
                case 8:
                    return Exit()
        except ValidationError as err:
            raise CommandError(str(err), field="command") from err
        return None

    def _print_menu(self) -> None:
        lines = [f"Welcome to the {self._shop_name}"]
        lines.extend(f"{idx}. {label}" for idx, label in enumerate(MENU_OPTIONS, start=1))
        self._output("\n".join(lines))

    def _read_pledge_fields(self) -> dict[str, object]:
        return {
            "imei": self._read_int("Enter IMEI: ", field="imei"),
            "price": self._read_int("Enter Price: ", field="price"),
            "manufacturer": self._input("Enter Manufacturer: ").strip(),
            "for_sale": self._read_flag("Enter For Sale (1 for Yes, 0 for No): ", field="for_sale"),
        }

    def _read_int(self, prompt: str, *, field: str) -> int:
        raw = self._input(prompt).strip()
        try:
            return int(raw)
        except ValueError as err:
            raise CommandError(f"{field} must be an integer", field=field, raw_value=raw) from err

    def _read_flag(self, prompt: str, *, field: str) -> bool:
        raw = self._input(prompt).strip().lower()
        if raw in TRUE_VALUES:
            return True
        if raw in FALSE_VALUES:
            return False
        raise CommandError(f"{field} must be yes or no", field=field, raw_value=raw)
