"""Saving and loading texts, number arrays, watch records and sentences."""

from __future__ import annotations

import argparse
import struct
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import Optional, Union

from labstructs.watch import WristWatch

PathLike = Union[str, Path]

FILE_NAMES = (
    "lab_text.txt",
    "lab_array.txt",
    "lab_watches.txt",
    "lab_watches.bin",
    "lab_sentences.txt",
)

ARRAY_SEPARATOR = "}"
TEXT_RECORD_LINES = 5 + WristWatch.MAX_TIME_AMOUNT

# int32 diamonds, float64 price, one UTF-16 unit model, bool flag,
# MAX_NAME_SIZE UTF-16 units of brand name, six int32 offsets.
_BINARY_RECORD = struct.Struct(
    f"<id2s?{2 * WristWatch.MAX_NAME_SIZE}s{WristWatch.MAX_TIME_AMOUNT}i"
)
RECORD_SIZE = _BINARY_RECORD.size

MENU = (
    "Enter:\n0 - Exit\n1 - Save text to file\n2 - Load text from file"
    "\n3 - Save array to file\n4 - Load array from file\n5 - Save struct to file"
    "\n6 - Load structs from file\n7 - Save struct to binary file"
    "\n8 - Load struct from binary file\n9 - Save sentence to file"
    "\n10 - Load sentences from file\n"
)
INVALID_CHOICE = "Please enter a number between 0 and 10."


def create_missing_files(
    directory: PathLike, names: Iterable[str] = FILE_NAMES
) -> list[Path]:
    """Create empty files for the names that do not exist yet; return them."""
    directory = Path(directory)
    created = []
    for name in names:
        path = directory / name
        if not path.exists():
            path.touch()
            created.append(path)
    return created


def save_text(path: PathLike, text: str) -> None:
    """Replace the file's contents with the text."""
    Path(path).write_text(text, encoding="utf-8")


def load_text(path: PathLike) -> str:
    """Return the whole text of the file."""
    return Path(path).read_text(encoding="utf-8")


def _format_real(value: float) -> str:
    return f"{value:g}"


def save_array(path: PathLike, values: Iterable[float]) -> None:
    """Write the numbers, each followed by the '}' separator."""
    text = "".join(_format_real(value) + ARRAY_SEPARATOR for value in values)
    Path(path).write_text(text, encoding="utf-8")


def load_array(path: PathLike) -> list[float]:
    """Read the numbers written by save_array, skipping empty fields."""
    data = Path(path).read_text(encoding="utf-8")
    return [float(item) for item in data.split(ARRAY_SEPARATOR) if item]


def _watch_lines(watch: WristWatch) -> list[str]:
    return [
        str(watch.number_of_diamonds),
        _format_real(watch.price),
        watch.model,
        "true" if watch.is_expensive else "false",
        watch.brand_name,
        *(str(offset) for offset in watch.world_time_offsets),
    ]


def append_watch_text(path: PathLike, watch: WristWatch) -> None:
    """Append the watch as eleven lines of text."""
    with open(path, "a", encoding="utf-8") as stream:
        stream.write("".join(line + "\n" for line in _watch_lines(watch)))


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def load_watches_text(path: PathLike) -> list[WristWatch]:
    """Read every complete eleven-line watch record from a text file."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    watches = []
    for start in range(0, len(lines) - TEXT_RECORD_LINES + 1, TEXT_RECORD_LINES):
        data = lines[start : start + TEXT_RECORD_LINES]
        watches.append(
            WristWatch(
                number_of_diamonds=_to_int(data[0]),
                price=_to_float(data[1]),
                model=data[2][0] if data[2] else " ",
                is_expensive=data[3] == "true",
                brand_name=data[4][: WristWatch.MAX_NAME_SIZE - 1],
                world_time_offsets=tuple(_to_int(item) for item in data[5:]),
            )
        )
    return watches


def format_watch_rows(watches: Iterable[WristWatch], separator: str = "|") -> str:
    """Render one line per watch with its fields and offsets split by separator."""
    rows = []
    for watch in watches:
        fields = [
            str(watch.number_of_diamonds),
            _format_real(watch.price),
            watch.model,
            "true" if watch.is_expensive else "false",
            watch.brand_name,
            *(str(offset) for offset in watch.world_time_offsets),
        ]
        rows.append(separator.join(fields) + "\n")
    return "".join(rows)


def _pack_watch(watch: WristWatch) -> bytes:
    model = watch.model.encode("utf-16-le")
    if len(model) != 2:
        raise ValueError("the model must fit in one UTF-16 unit")
    name = watch.brand_name.encode("utf-16-le")
    if len(name) > 2 * (WristWatch.MAX_NAME_SIZE - 1):
        raise ValueError("the brand name is too long for a binary record")
    return _BINARY_RECORD.pack(
        watch.number_of_diamonds,
        watch.price,
        model,
        watch.is_expensive,
        name,
        *watch.world_time_offsets,
    )


def append_watch_binary(path: PathLike, watch: WristWatch) -> None:
    """Append the watch as one fixed-size binary record."""
    with open(path, "ab") as stream:
        stream.write(_pack_watch(watch))


def load_watches_binary(path: PathLike) -> list[WristWatch]:
    """Read every binary watch record from the file."""
    data = Path(path).read_bytes()
    if len(data) % RECORD_SIZE:
        raise ValueError("the file ends with a truncated watch record")
    watches = []
    for diamonds, price, model, expensive, name, *offsets in _BINARY_RECORD.iter_unpack(
        data
    ):
        watches.append(
            WristWatch(
                number_of_diamonds=diamonds,
                price=price,
                model=model.decode("utf-16-le"),
                is_expensive=expensive,
                brand_name=name.decode("utf-16-le").split("\x00", 1)[0],
                world_time_offsets=tuple(offsets),
            )
        )
    return watches


def append_sentence(path: PathLike, sentence: str) -> None:
    """Append the sentence as one line."""
    with open(path, "a", encoding="utf-8") as stream:
        stream.write(sentence + "\n")


def load_sentences(path: PathLike) -> list[str]:
    """Return the file's lines without their line endings."""
    return Path(path).read_text(encoding="utf-8").splitlines()


def _prompt_watch() -> WristWatch:
    brand = input("Brand name: ")[: WristWatch.MAX_NAME_SIZE - 1]
    model = input("Model: ")
    diamonds = int(input("Number of diamonds: "))
    price = float(input("Price: "))
    expensive = input("Expensive? (y/n): ").strip().lower() in ("y", "yes", "true", "1")
    offsets = tuple(
        int(input(f"Time offset #{number}: "))
        for number in range(1, WristWatch.MAX_TIME_AMOUNT + 1)
    )
    return WristWatch(diamonds, price, model[0] if model else " ", expensive, brand, offsets)


def _show(path: Path, text: str) -> None:
    print(f"{path.name} Output")
    print(text)


def _save_text_action(path: Path) -> None:
    save_text(path, input("Enter a paragraph of text: "))


def _load_text_action(path: Path) -> None:
    _show(path, load_text(path))


def _save_array_action(path: Path) -> None:
    size = int(input("Enter number of array elements: "))
    values = [float(input(f"Enter element #{index}: ")) for index in range(size)]
    save_array(path, values)


def _load_array_action(path: Path) -> None:
    _show(path, " ".join(_format_real(value) for value in load_array(path)))


def _save_watch_text_action(path: Path) -> None:
    append_watch_text(path, _prompt_watch())


def _load_watch_text_action(path: Path) -> None:
    _show(path, format_watch_rows(load_watches_text(path), "|"))


def _save_watch_binary_action(path: Path) -> None:
    append_watch_binary(path, _prompt_watch())


def _load_watch_binary_action(path: Path) -> None:
    _show(path, format_watch_rows(load_watches_binary(path), ";"))


def _save_sentence_action(path: Path) -> None:
    append_sentence(path, input("Enter a sentence: "))


def _load_sentences_action(path: Path) -> None:
    _show(path, "".join(line + "\n" for line in load_sentences(path)))


_ACTIONS: dict[int, tuple[Callable[[Path], None], int]] = {
    1: (_save_text_action, 0),
    2: (_load_text_action, 0),
    3: (_save_array_action, 1),
    4: (_load_array_action, 1),
    5: (_save_watch_text_action, 2),
    6: (_load_watch_text_action, 2),
    7: (_save_watch_binary_action, 3),
    8: (_load_watch_binary_action, 3),
    9: (_save_sentence_action, 4),
    10: (_load_sentences_action, 4),
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive file menu until the user chooses 0 or input ends."""
    parser = argparse.ArgumentParser(description="Save and load lab data files.")
    parser.add_argument(
        "-d", "--directory", type=Path, default=Path("."),
        help="directory that holds the data files",
    )
    args = parser.parse_args(argv)
    directory: Path = args.directory

    while True:
        try:
            raw = input(MENU)
        except EOFError:
            return 0
        try:
            choice = int(raw)
        except ValueError:
            choice = -1
        if choice == 0:
            return 0
        if choice not in _ACTIONS:
            print(INVALID_CHOICE)
            continue
        create_missing_files(directory, FILE_NAMES)
        action, file_index = _ACTIONS[choice]
        try:
            action(directory / FILE_NAMES[file_index])
        except EOFError:
            return 0
        except (OSError, ValueError) as exc:
            print(f"Error: {exc}")