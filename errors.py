# errors.py
from __future__ import annotations


class EarTrainerError(Exception):
    """Base error for the ear trainer."""


# ---------- 音名解析 ----------
class NoteParseError(EarTrainerError, ValueError):
    """Raised when a note name cannot be turned into a pitch."""


class InvalidLength(NoteParseError):
    def __init__(self, text: str = ""):
        super().__init__("Incorrect amount of characters in note name")
        self.text = text


class InvalidNoteLetter(NoteParseError):
    def __init__(self, letter: str = ""):
        super().__init__("Invalid note name, must be A-G")
        self.letter = letter


class InvalidAccidental(NoteParseError):
    def __init__(self, char: str = ""):
        super().__init__("Invalid second character, must be # or b")
        self.char = char


class InvalidOctave(NoteParseError):
    def __init__(self, char: str = ""):
        super().__init__("Invalid octave, must be number between 0 and 9")
        self.char = char


class PitchOutOfRange(NoteParseError):
    def __init__(self, pitch: int):
        super().__init__(f"Pitch {pitch} is outside the MIDI range 0-127")
        self.pitch = pitch


# ---------- 選項 ----------
class OptionError(EarTrainerError, ValueError):
    """Raised when a menu code does not select a variant."""


class MalformedInput(OptionError):
    def __init__(self, text):
        super().__init__(f"Not a non-negative whole number: {text!r}")
        self.text = text


class UnknownOptionCode(OptionError):
    def __init__(self, code: int, count: int):
        super().__init__(f"Option {code} does not exist, choose 0-{count - 1}")
        self.code = code
        self.count = count


class RangeOrderViolation(EarTrainerError):
    def __init__(self, low: int, high: int):
        super().__init__("Upper bound can't be same as or lower than first bound")
        self.low = low
        self.high = high


class MidiDeviceError(EarTrainerError):
    """Raised when no usable MIDI output can be opened."""
