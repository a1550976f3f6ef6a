from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Account:
    """
    Who is using the terminal.
    Both fields are free text typed at the prompt; nothing checks them.
    """
    id: str
    holder: str
