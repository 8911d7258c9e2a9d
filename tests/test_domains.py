import pytest

from errors import MalformedInput, UnknownOptionCode
from options.domains import GameMode, NoteMode, SeqMode, decode_option


def test_codes_follow_declaration_order() -> None:
    assert [int(v) for v in GameMode] == [0, 1, 2, 3]
    assert [int(v) for v in NoteMode] == [0, 1, 2]
    assert [int(v) for v in SeqMode] == [0, 1]


def test_decode_option_maps_codes() -> None:
    assert decode_option(0, GameMode) is GameMode.NOTES
    assert decode_option(3, GameMode) is GameMode.SCALES
    assert decode_option("2", NoteMode) is NoteMode.RANDOM
    assert decode_option(" 1 \n", SeqMode) is SeqMode.NO_REPEAT


@pytest.mark.parametrize(("code", "domain"), [(4, GameMode), ("3", NoteMode), ("2", SeqMode)])
def test_decode_option_rejects_unknown_codes(code, domain) -> None:
    with pytest.raises(UnknownOptionCode):
        decode_option(code, domain)


@pytest.mark.parametrize("code", [-1, "-1", "x", "", "1.0", "+1", "١", True])
def test_decode_option_rejects_malformed_input(code) -> None:
    with pytest.raises(MalformedInput):
        decode_option(code, GameMode)


def test_menu_lines_are_zero_indexed() -> None:
    lines = GameMode.menu_lines()
    assert len(lines) == 4
    assert lines[0].startswith("0: Notes")
    assert "interval between them" in lines[1]
