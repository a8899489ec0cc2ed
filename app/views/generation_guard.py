from typing import Dict


class GenerationGuard:
    """
    Per-key request generations for view slots.

    Each fetch takes a ticket before awaiting the model. Only the holder of the latest
    ticket for a key may write its result, so a superseded request that resolves late
    is discarded instead of overwriting newer state.
    """

    def __init__(self) -> None:
        self._generations: Dict[str, int] = {}

    def begin(self, key: str) -> int:
        generation = self._generations.get(key, 0) + 1
        self._generations[key] = generation
        return generation

    def is_current(self, key: str, generation: int) -> bool:
        return self._generations.get(key) == generation
