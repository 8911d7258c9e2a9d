# ========================= options/settings.py =========================
from dataclasses import dataclass
from typing import Tuple

from options.domains import GameMode, NoteMode, SeqMode

@dataclass
class Configuration:
    range: Tuple[int, int] = (48, 72)               # C3-C5
    range_names: Tuple[str, str] = ("C3", "C5")     # 只用於顯示，不由 range 反推
    game_mode: GameMode = GameMode.INTERVALS
    note_mode: NoteMode = NoteMode.SEQUENTIAL
    seq_mode: SeqMode = SeqMode.TRUE_RANDOM
    allow_repeat: bool = True

    def pitch_range(self):
        """Inclusive range of playable pitches."""
        low, high = self.range
        return range(low, high + 1)

    def summary(self) -> str:
        return "\n".join([
            f"Game Mode: {self.game_mode.label}",
            f"Note Mode: {self.note_mode.label}",
            f"Sequence: {self.seq_mode.label}",
            f"Range: {self.range_names[0]}-{self.range_names[1]}",
            f"Allow Repeat: {self.allow_repeat}",
        ])

    def __str__(self) -> str:
        return self.summary()
