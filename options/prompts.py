# ========================= options/prompts.py =========================
"""
互動式設定：每個 prompt 都是無上限的重試迴圈，
只有驗證成功才寫回 Configuration；輸入關閉（EOFError）才會往外丟。
"""
import logging
from typing import Callable, Tuple, Type

from errors import NoteParseError, OptionError, RangeOrderViolation
from notes.codec import parse
from notes.model import ParsedNote
from options.domains import GameMode, NoteMode, OptionT, SeqMode, decode_option
from options.settings import Configuration

log = logging.getLogger(__name__)

Reader = Callable[[str], str]

def prompt_enum(label: str, domain: Type[OptionT], read: Reader = input) -> OptionT:
    print(label)
    for line in domain.menu_lines():
        print(line)
    while True:
        raw = read("Enter number: ")
        try:
            return decode_option(raw, domain)
        except OptionError as e:
            log.debug("rejected %s code %r: %s", domain.__name__, raw, e)
            print("Invalid input")

def prompt_note(label: str, read: Reader = input) -> ParsedNote:
    while True:
        raw = read(f"{label}: ").strip()
        try:
            return parse(raw)
        except NoteParseError as e:
            log.debug("rejected note %r: %s", raw, e)
            print(f"Error: {e}")

def prompt_boolean(label: str, zero_meaning: str, one_meaning: str, read: Reader = input) -> bool:
    print(label)
    print(f"0: {zero_meaning}")
    print(f"1: {one_meaning}")
    while True:
        raw = read("Enter number: ").strip()
        if raw == "0":
            return False
        if raw == "1":
            return True
        log.debug("rejected boolean %r", raw)
        print("Invalid input")

def check_range(low: ParsedNote, high: ParsedNote) -> None:
    if low.pitch >= high.pitch:
        raise RangeOrderViolation(low.pitch, high.pitch)

def prompt_range(read: Reader = input) -> Tuple[ParsedNote, ParsedNote]:
    """Ask for both bounds; a descending pair throws both away and starts over."""
    print("Please select a note range: ")
    while True:
        low = prompt_note("Range lower bound", read)
        high = prompt_note("Range upper bound", read)
        try:
            check_range(low, high)
        except RangeOrderViolation as e:
            log.debug("rejected range %s-%s", low, high)
            print(e)
            continue
        return low, high

def configure(config: Configuration, read: Reader = input) -> Configuration:
    config.game_mode = prompt_enum("Please select game mode:", GameMode, read)
    config.note_mode = prompt_enum("Please select note mode:", NoteMode, read)
    config.seq_mode = prompt_enum("Please select sequence mode", SeqMode, read)

    low, high = prompt_range(read)
    config.range = (low.pitch, high.pitch)
    config.range_names = (low.name, high.name)

    config.allow_repeat = prompt_boolean(
        "Allow repetition of questions?",
        "Disallow   -   the sound for a question will only be heard once",
        "Allow      -   the sound for a question can be replayed at will",
        read,
    )
    log.info("configuration complete: %s", config.summary().replace("\n", ", "))
    return config
