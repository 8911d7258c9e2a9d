from options.domains import GameMode, NoteMode, SeqMode
from options.settings import Configuration


def test_defaults() -> None:
    config = Configuration()
    assert config.range == (48, 72)
    assert config.range_names == ("C3", "C5")
    assert config.game_mode is GameMode.INTERVALS
    assert config.note_mode is NoteMode.SEQUENTIAL
    assert config.seq_mode is SeqMode.TRUE_RANDOM
    assert config.allow_repeat is True


def test_pitch_range_is_inclusive() -> None:
    config = Configuration(range=(60, 62))
    assert list(config.pitch_range()) == [60, 61, 62]


def test_summary_uses_range_names() -> None:
    config = Configuration(range=(49, 70), range_names=("Db3", "Bb4"), allow_repeat=False)
    assert config.summary() == (
        "Game Mode: Intervals\n"
        "Note Mode: Sequential\n"
        "Sequence: True Random\n"
        "Range: Db3-Bb4\n"
        "Allow Repeat: False"
    )
    assert str(config) == config.summary()
