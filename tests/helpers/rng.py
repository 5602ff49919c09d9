import random
from collections.abc import Iterable, Sequence


class ScriptedRandom(random.Random):
    """Random source that replays fixed draws.

    ``random()`` returns the scripted values in order and then ``default``
    forever; ``choice`` always picks the first candidate.
    """

    def __init__(self, values: Iterable[float] = (), default: float = 0.99) -> None:
        super().__init__(0)
        self.values = list(values)
        self.default = default
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        if self.values:
            return self.values.pop(0)
        return self.default

    def choice[T](self, seq: Sequence[T]) -> T:
        return seq[0]
