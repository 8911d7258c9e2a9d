# ========================= notes/codec.py =========================
from errors import (
    InvalidAccidental, InvalidLength, InvalidNoteLetter, InvalidOctave, PitchOutOfRange,
)
from notes.model import MAX_PITCH, MIN_PITCH, ParsedNote

# 一個八度內的半音表；空位 None 為黑鍵，只能透過升降號到達
SEMITONES = ["C", None, "D", None, "E", "F", None, "G", None, "A", None, "B"]
LETTER_OFFSET = {name: i for i, name in enumerate(SEMITONES) if name is not None}
ACCIDENTAL_OFFSET = {"#": 1, "b": -1}
SHARP_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
LOWEST_NAMED_PITCH = 11  # Cb0

def decode(text: str) -> int:
    """Convert a note name such as 'C#4' or 'bb2' to a MIDI pitch.

    Checks run in a fixed order (length, letter, accidental, octave) so the
    first problem found is the one reported. Results outside 0-127 are
    rejected rather than wrapped.
    """
    if len(text) not in (2, 3):
        raise InvalidLength(text)

    letter = text[0].upper()
    if letter not in LETTER_OFFSET:
        raise InvalidNoteLetter(text[0])

    accidental = 0
    if len(text) == 3:
        if text[1] not in ACCIDENTAL_OFFSET:
            raise InvalidAccidental(text[1])
        accidental = ACCIDENTAL_OFFSET[text[1]]

    octave = text[-1]
    if not ("0" <= octave <= "9"):
        raise InvalidOctave(octave)

    pitch = (int(octave) + 1) * 12 + LETTER_OFFSET[letter] + accidental
    if not (MIN_PITCH <= pitch <= MAX_PITCH):
        raise PitchOutOfRange(pitch)
    return pitch

def canonical(text: str) -> str:
    return text[:1].upper() + text[1:]

def parse(text: str) -> ParsedNote:
    return ParsedNote(pitch=decode(text), name=canonical(text))

def encode(pitch: int) -> str:
    """Sharp spelling of a pitch, e.g. 61 -> 'C#4'.

    Covers every pitch decode() can produce. The lowest, 11, only has a name
    as Cb0, so that is the one flat ever returned. Pitches 0-10 sit in MIDI
    octave -1, which a single-digit octave cannot express, and are rejected.
    """
    if pitch == LOWEST_NAMED_PITCH:
        return "Cb0"
    if not (LOWEST_NAMED_PITCH < pitch <= MAX_PITCH):
        raise PitchOutOfRange(pitch)
    return f"{SHARP_NAMES[pitch % 12]}{pitch // 12 - 1}"
