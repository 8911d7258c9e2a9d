from typing import Iterable, List


class ScriptedInput:
    """Stands in for ``input``: returns queued lines and records each prompt."""

    def __init__(self, lines: Iterable[str]):
        self.lines: List[str] = list(lines)
        self.prompts: List[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class FakeOutput:
    """Records what pygame.midi.Output.write_short would have sent."""

    def __init__(self, fail: bool = False):
        self.sent: list[tuple[int, ...]] = []
        self.closed = False
        self.fail = fail

    def write_short(self, status, data1=0, data2=0):
        if self.fail:
            raise RuntimeError("device unplugged")
        self.sent.append((status, data1, data2))

    def close(self):
        self.closed = True
