"""Wrist watch records, their one-line text form and a printable HTML report."""

from __future__ import annotations

import html
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import ClassVar

TIME_ZONE_MIN = -12
TIME_ZONE_MAX = 14
MAX_MODEL_INPUT = 6

REPORT_HEADING = "Full watch data"


@dataclass(frozen=True)
class WristWatch:
    """A wrist watch with a brand, a one-letter model and six world time offsets."""

    MAX_NAME_SIZE: ClassVar[int] = 20
    MAX_TIME_AMOUNT: ClassVar[int] = 6

    number_of_diamonds: int
    price: float
    model: str
    is_expensive: bool
    brand_name: str
    world_time_offsets: tuple[int, ...] = field(
        default=(0, 0, 0, 0, 0, 0)
    )

    def __post_init__(self) -> None:
        offsets = tuple(int(offset) for offset in self.world_time_offsets)
        if len(offsets) != self.MAX_TIME_AMOUNT:
            raise ValueError(
                f"a watch needs exactly {self.MAX_TIME_AMOUNT} time offsets"
            )
        object.__setattr__(self, "world_time_offsets", offsets)
        if len(self.model) != 1:
            raise ValueError("the model must be a single character")
        if len(self.brand_name) > self.MAX_NAME_SIZE - 1:
            raise ValueError(
                f"the brand name holds at most {self.MAX_NAME_SIZE - 1} characters"
            )

    def describe(self) -> str:
        """Return the fields joined by '|', offsets separated by ', '."""
        offsets = ", ".join(str(offset) for offset in self.world_time_offsets)
        return "|".join(
            (
                str(self.number_of_diamonds),
                f"{self.price:.2f}",
                self.model,
                "true" if self.is_expensive else "false",
                self.brand_name,
                offsets,
            )
        )


def from_user_input(
    brand: str,
    model: str,
    diamonds: int,
    price: float,
    expensive: bool,
    offsets: Iterable[int],
) -> WristWatch:
    """Build a watch from form input, validating it as the input dialog does."""
    if not brand:
        raise ValueError("The 'Brand name' field cannot be empty")
    if not model:
        raise ValueError("The 'Model' field cannot be empty")
    if len(model) > MAX_MODEL_INPUT:
        raise ValueError("The model may hold only one character")

    offsets = tuple(offsets)
    if len(offsets) != WristWatch.MAX_TIME_AMOUNT:
        raise ValueError(
            f"exactly {WristWatch.MAX_TIME_AMOUNT} time offsets are required"
        )
    for offset in offsets:
        if not TIME_ZONE_MIN <= offset <= TIME_ZONE_MAX:
            raise ValueError(
                f"time offset {offset} is outside {TIME_ZONE_MIN}..{TIME_ZONE_MAX}"
            )

    return WristWatch(
        number_of_diamonds=diamonds,
        price=price,
        model=model[0],
        is_expensive=expensive,
        brand_name=brand[: WristWatch.MAX_NAME_SIZE - 1],
        world_time_offsets=offsets,
    )


def preset_watches() -> dict[str, WristWatch]:
    """Return the four built-in watches keyed by the way they were set up."""
    return {
        "initWithStr": WristWatch(
            100, 100000.99, "M", True, "Rolex", (-1, 2, 6, 9, -6, -3)
        ),
        "initWithCode": WristWatch(25, 5000, "O", False, "Omega", (2, 2, 3, 5, 0, -4)),
        "initWithPtr": WristWatch(
            100, 15000.75, "C", True, "Cartier", (1, 1, 1, 1, 1, 1)
        ),
        "initWithRef": WristWatch(10, 3000.50, "T", False, "Tag Heuer", (0, 0, 0, 0, 0, 0)),
    }


def render_report(sections: Mapping[str, str] | Iterable[tuple[str, str]]) -> str:
    """Render titled text sections as one HTML document."""
    pairs = sections.items() if isinstance(sections, Mapping) else sections
    parts = [
        "<html><body style='font-family:Arial;'>",
        f"<h1>{html.escape(REPORT_HEADING)}</h1>",
    ]
    for title, text in pairs:
        parts.append(
            f"<h2>{html.escape(title)}</h2>"
            f"<div style='margin-left:20px;'>{html.escape(text)}</div>"
        )
    parts.append("</body></html>")
    return "".join(parts)