import logging
import time

import mido
import pygame.midi

from errors import MidiDeviceError

log = logging.getLogger(__name__)

def list_output_ports():
    """[(device id, name)] for every pygame.midi output device."""
    pygame.midi.init()
    try:
        ports = []
        for dev in range(pygame.midi.get_count()):
            info = pygame.midi.get_device_info(dev)
            # info = (interf, name, is_input, is_output, opened)
            if info and info[3]:
                ports.append((dev, info[1].decode(errors="replace")))
        return ports
    finally:
        pygame.midi.quit()

class Synth:
    """
    單一 MIDI 輸出埠的播放器：
    - play(pitch, duration) 送 note_on，等待 duration 個 tick，再送 note_off
    - 裝置由這個物件獨佔；需要發聲的元件直接拿到 Synth，不共用 handle
    """
    def __init__(self, cfg, output=None):
        self.cfg = cfg
        self._sounding: set[int] = set()
        # 先建好訊息（mido 會檢查範圍），失敗時還沒有開任何埠
        program = None
        if cfg.instrument is not None:
            program = mido.Message("program_change", channel=cfg.channel, program=cfg.instrument)

        self.midi_out = output
        self._owns_midi = False
        if self.midi_out is None:
            self.midi_out = self._open(cfg.port)
            self._owns_midi = True
        if program is not None:
            self._send(program)

    def _open(self, port):
        pygame.midi.init()
        dev = pygame.midi.get_default_output_id() if port is None else port
        if dev == -1:
            pygame.midi.quit()
            raise MidiDeviceError(
                "No MIDI output port found, please connect a MIDI device or open a virtual instrument")
        info = pygame.midi.get_device_info(dev)
        # info = (interf, name, is_input, is_output, opened)
        if info is None or not info[3]:
            pygame.midi.quit()
            raise MidiDeviceError(f"MIDI device {dev} is not an output port")
        print(f"Using MIDI output: {info[1].decode(errors='replace')}")
        log.info("opening MIDI output %s (%r)", dev, info[1])
        return pygame.midi.Output(dev)

    def _send(self, msg: "mido.Message"):
        try:
            self.midi_out.write_short(*msg.bytes())
        except Exception as e:
            # 發送失敗不中斷播放流程
            log.warning("MIDI send failed (%s): %s", msg.type, e)

    def note_on(self, pitch: int):
        self._send(mido.Message("note_on", channel=self.cfg.channel,
                                note=pitch, velocity=self.cfg.velocity))
        self._sounding.add(pitch)

    def note_off(self, pitch: int):
        self._send(mido.Message("note_off", channel=self.cfg.channel,
                                note=pitch, velocity=self.cfg.velocity))
        self._sounding.discard(pitch)

    def play(self, pitch: int, duration: int = 2):
        """Sound *pitch* for *duration* ticks, blocking until the note-off is sent."""
        self.note_on(pitch)
        try:
            time.sleep(duration * self.cfg.tick_ms / 1000.0)
        finally:
            self.note_off(pitch)

    def all_notes_off(self):
        for p in sorted(self._sounding):
            self.note_off(p)

    def close(self):
        if self.midi_out is None:
            return
        try:
            self.all_notes_off()
            self.midi_out.close()
        finally:
            self.midi_out = None
            if self._owns_midi:
                pygame.midi.quit()
                self._owns_midi = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
