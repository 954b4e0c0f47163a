from __future__ import annotations


def format_flag(value: bool) -> str:
    return "Yes" if value else "No"
