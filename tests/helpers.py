from collections import deque


class ScriptedGenerator:
    """PositionGenerator that hands out a fixed sequence of values."""

    def __init__(self, positions=(), ints=()):
        self.positions = deque(positions)
        self.ints = deque(ints)
        self.position_calls = 0

    def random_position(self, size):
        self.position_calls += 1
        if not self.positions:
            raise AssertionError('ScriptedGenerator ran out of positions')
        x, y = self.positions.popleft()
        assert 1 <= x <= size and 1 <= y <= size, (x, y, size)
        return (x, y)

    def randint(self, lo, hi):
        if not self.ints:
            raise AssertionError('ScriptedGenerator ran out of ints')
        value = self.ints.popleft()
        assert lo <= value <= hi, (value, lo, hi)
        return value


class RecordingRenderer:
    """Renderer that records calls instead of writing escape sequences."""

    def __init__(self, size):
        self.size = size
        self.calls = []

    def setup(self):
        self.calls.append(('setup',))

    def clear_screen(self):
        self.calls.append(('clear_screen',))

    def draw_cell(self, p, glyph, color=None):
        self.calls.append(('draw_cell', p, glyph, color))

    def draw_snake_segment(self, p):
        self.calls.append(('snake', p))

    def draw_fruit(self, p):
        self.calls.append(('fruit', p))

    def clear_cell(self, p):
        self.calls.append(('clear', p))

    def draw_score(self, score):
        self.calls.append(('score', score))


class FakeTerminal:
    """Context manager standing in for TerminalMode."""

    fd = None

    def __init__(self):
        self.entered = 0
        self.exited = 0
        self.exit_exc_type = None

    def __enter__(self):
        self.entered += 1
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exited += 1
        self.exit_exc_type = exc_type
        return False


def token_reader(tokens):
    it = iter(tokens)
    return lambda: next(it, b'')
