from __future__ import annotations

from typing import Callable, Iterable

from domain.pawn_shop import PawnShop
from shell.console import Console


def scripted_input(lines: Iterable[str]) -> Callable[[str], str]:
    remaining = iter(lines)

    def _input(prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return _input


def run_console(shop: PawnShop, lines: list[str]) -> list[str]:
    outputs: list[str] = []
    Console(shop, input_fn=scripted_input(lines), output=outputs.append).run()
    return outputs


def test_scenario_through_menu(shop: PawnShop) -> None:
    lines = [
        "1", "1", "100", "Samsung Galaxy", "1", "1",
        "3", "1",
        "2", "2", "200", "Apple", "yes", "no",
        "3", "2",
        "1", "3", "50", "Nokia", "0", "0",
        "3", "3",
        "4", "3",
        "7",
        "8",
    ]  # fmt: skip

    outputs = run_console(shop, lines)

    assert "Mobile phone added successfully." in outputs
    assert "Tablet added successfully." in outputs
    assert outputs.count("Device sold.") == 2
    assert "Device could not be sold (not found or already sold)." in outputs
    assert "Device released." in outputs
    assert "Account balance: 750\nAvailable devices: 0\nSold devices: 2" in outputs
    assert outputs[-1] == "Thank you for using PawnShop Manager. Goodbye!"
    assert [d.manufacturer for d in shop.sold_devices()] == ["Samsung Galaxy", "Apple"]
    assert shop.available_devices() == []


def test_menu_lists_all_options(shop: PawnShop) -> None:
    outputs: list[str] = []
    Console(shop, shop_name="Corner Pawn", input_fn=scripted_input(["8"]), output=outputs.append).run()

    menu = outputs[0].splitlines()
    assert menu[0] == "Welcome to the Corner Pawn"
    assert menu[1] == "1. Add a Mobile Phone"
    assert menu[-1] == "8. Exit"
    assert outputs[-1] == "Thank you for using Corner Pawn. Goodbye!"


def test_invalid_input_is_reported_and_loop_continues(shop: PawnShop) -> None:
    lines = [
        "abc",
        "9",
        "1", "x",
        "1", "1", "-5", "Samsung", "1", "1",
        "2", "2", "200", "Apple", "maybe",
        "7",
    ]  # fmt: skip

    outputs = run_console(shop, lines)

    assert outputs.count("Invalid input, please try again.") == 4
    assert "Invalid choice. Please try again." in outputs
    assert "Account balance: 0\nAvailable devices: 0\nSold devices: 0" in outputs
    assert shop.available_devices() == []


def test_end_of_input_exits(shop: PawnShop) -> None:
    outputs = run_console(shop, ["5"])

    assert outputs[1] == "Available Devices:\n"
    assert outputs[-1] == "Thank you for using PawnShop Manager. Goodbye!"
