# notes/model.py
from dataclasses import dataclass

MIN_PITCH, MAX_PITCH = 0, 127

@dataclass(frozen=True)
class ParsedNote:
    pitch: int      # MIDI note number
    name: str       # 使用者輸入的音名（字母大寫），僅供顯示

    def __str__(self) -> str:
        return self.name
