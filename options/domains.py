# ========================= options/domains.py =========================
from enum import IntEnum
from typing import Dict, Type, TypeVar, Union

from errors import MalformedInput, UnknownOptionCode

class MenuOption(IntEnum):
    """IntEnum whose members carry a (label, description) pair for the menu."""

    def __new__(cls, code: int, label: str, description: str):
        obj = int.__new__(cls, code)
        obj._value_ = code
        obj.label = label
        obj.description = description
        return obj

    @classmethod
    def menu_lines(cls) -> list[str]:
        return [f"{v.value}: {v.label:<12} -   {v.description}" for v in cls]

class GameMode(MenuOption):
    NOTES = (0, "Notes", "Hear individual notes and enter their names")
    INTERVALS = (1, "Intervals", "Hear two notes and enter the interval between them")
    CHORDS = (2, "Chords", "Hear chords and enter their names")
    SCALES = (3, "Scales", "Hear scales and enter their names")

class NoteMode(MenuOption):
    CLUSTER = (0, "Cluster", "Notes are played simultaneously in chords/chordiods")
    SEQUENTIAL = (1, "Sequential", "Notes are played in sequence")
    RANDOM = (2, "Random", "Pick mode randomly for each question")

class SeqMode(MenuOption):
    TRUE_RANDOM = (0, "True Random", "Notes/Chords are picked at random")
    NO_REPEAT = (1, "No Repeat", "Randomize, but make sure all questions appear before repetition")

OptionT = TypeVar("OptionT", bound=MenuOption)

def _code_table(domain: Type[OptionT]) -> Dict[int, OptionT]:
    return {i: v for i, v in enumerate(domain)}

# 明確的 code -> variant 對照表，不依賴 Enum 的動態轉型
CODE_TABLES = {d: _code_table(d) for d in (GameMode, NoteMode, SeqMode)}

def decode_option(code: Union[int, str], domain: Type[OptionT]) -> OptionT:
    if isinstance(code, str):
        text = code.strip()
        if not (text.isascii() and text.isdigit()):
            raise MalformedInput(code)
        code = int(text)
    elif isinstance(code, bool) or not isinstance(code, int) or code < 0:
        raise MalformedInput(code)

    table = CODE_TABLES.get(domain) or _code_table(domain)
    if code not in table:
        raise UnknownOptionCode(code, len(table))
    return table[code]
