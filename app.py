# app.py
import logging
import time
from typing import Callable, Optional

from audio.synth import Synth
from config import AppConfig
from errors import NoteParseError
from notes.codec import encode, parse
from options.prompts import configure
from options.settings import Configuration
from ui.console import clear_screen, print_banner, print_summary

__version__ = "0.1"

log = logging.getLogger(__name__)

NOTE_TEST_DURATION = 2  # ticks
QUIT_WORDS = ("", "q", "quit")

class App:
    """One trainer session: open the output, configure, optionally audition notes.

    Every instance starts from a default Configuration; nothing is carried over
    from a previous session.
    """
    def __init__(self, cfg: AppConfig, synth: Optional[Synth] = None,
                 read: Callable[[str], str] = input):
        self.cfg = cfg
        self.read = read
        self.options = Configuration()
        print("\nOpening MIDI connection...")
        self.synth = synth if synth is not None else Synth(cfg.audio)
        if synth is None:
            time.sleep(1.0)  # 部分裝置開啟後需要一點時間才會發聲

    def note_test(self):
        """Type a note name, hear it. Blank line or 'q' returns."""
        print("Type a note (e.g. C4, F#3, Bb2) to hear it, or press Enter to stop.")
        while True:
            raw = self.read("Note: ").strip()
            if raw.lower() in QUIT_WORDS:
                return
            try:
                note = parse(raw)
            except NoteParseError as e:
                print(f"Error: {e}")
                continue
            spelled = encode(note.pitch)
            alias = f" = {spelled}" if spelled != note.name else ""
            print(f"Playing {note.name}{alias} (MIDI {note.pitch})")
            log.debug("note test: %s -> %d", note.name, note.pitch)
            self.synth.play(note.pitch, NOTE_TEST_DURATION)

    def run(self) -> Configuration:
        log.info("session start")
        try:
            clear_screen()
            print_banner(__version__)
            configure(self.options, self.read)
            print_summary(self.options)
            if self.cfg.note_test:
                self.note_test()
        finally:
            print("\nClosing connection")
            self.synth.close()
            print("Connection closed")
            log.info("session end")
        return self.options
