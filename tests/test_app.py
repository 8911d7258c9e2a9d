from app import App
from audio.synth import Synth
from config import AppConfig, AudioConfig
from helpers import FakeOutput, ScriptedInput
from options.domains import GameMode
import audio.synth as synth_mod


def _app(lines, note_test=False):
    out = FakeOutput()
    synth = Synth(AudioConfig(), output=out)
    app = App(AppConfig(note_test=note_test), synth=synth, read=ScriptedInput(lines))
    return app, out


def test_run_configures_and_closes(capsys) -> None:
    app, out = _app(["0", "1", "0", "C3", "G3", "1"])
    config = app.run()
    assert config.game_mode is GameMode.NOTES
    assert config.range == (48, 55)
    assert out.closed
    printed = capsys.readouterr().out
    assert "Welcome to Ear Trainer v0.1!" in printed
    assert "Range: C3-G3" in printed
    assert "Connection closed" in printed


def test_note_test_plays_valid_notes(monkeypatch, capsys) -> None:
    monkeypatch.setattr(synth_mod.time, "sleep", lambda s: None)
    app, out = _app(["1", "1", "0", "C3", "C5", "1", "A4", "Q4", "q"], note_test=True)
    app.run()
    assert out.sent == [(0x90, 69, 100), (0x80, 69, 100)]
    printed = capsys.readouterr().out
    assert "Error: Invalid note name, must be A-G" in printed
    assert "Playing A4 (MIDI 69)" in printed


def test_device_is_closed_when_input_ends() -> None:
    app, out = _app(["1"])
    try:
        app.run()
    except EOFError:
        pass
    assert out.closed


def test_each_app_starts_from_defaults() -> None:
    first, _ = _app(["0", "0", "1", "C2", "C6", "0"])
    first.run()
    second, _ = _app([])
    assert second.options.range == (48, 72)
    assert second.options.allow_repeat is True
