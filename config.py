# ========================= config.py =========================
from dataclasses import dataclass, field
from typing import Optional

@dataclass
class AudioConfig:
    port: Optional[int] = None        # None -> pygame 預設輸出
    velocity: int = 100
    tick_ms: int = 150                # play() 的 duration 單位
    channel: int = 0
    instrument: Optional[int] = None  # GM program；None 不送 program_change

@dataclass
class AppConfig:
    audio: AudioConfig = field(default_factory=AudioConfig)
    note_test: bool = False
    restart_on_error: bool = True
