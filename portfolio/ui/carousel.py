from dataclasses import dataclass
from threading import Lock
from typing import Optional

SWIPE_THRESHOLD_PX = 50


@dataclass(frozen=True)
class CarouselState:
    index: int = 0
    item_count: int = 0


@dataclass
class GestureState:
    start_x: Optional[float] = None
    end_x: Optional[float] = None

    def reset(self):
        self.start_x = None
        self.end_x = None


class CarouselController:
    """
    Índice com wraparound para um carrossel. Só transições de estado, sem I/O.
    Com item_count == 0, avançar/voltar não fazem nada.
    """

    def __init__(self, item_count: int = 0, name: str = "carousel"):
        if item_count < 0:
            raise ValueError("item_count must be >= 0")
        self.name = name
        self._state = CarouselState(0, item_count)
        self._gesture = GestureState()
        # protege _state: a busca resolve em outra thread (set_item_count)
        self._lock = Lock()

    @property
    def state(self) -> CarouselState:
        return self._state

    @property
    def index(self) -> int:
        return self._state.index

    @property
    def item_count(self) -> int:
        return self._state.item_count

    def set_item_count(self, item_count: int):
        """Nova lista de itens: sempre volta ao índice 0."""
        if item_count < 0:
            raise ValueError("item_count must be >= 0")
        with self._lock:
            self._state = CarouselState(0, item_count)

    def _step(self, offset: int):
        with self._lock:
            count = self._state.item_count
            if count == 0:
                return
            self._state = CarouselState((self._state.index + offset + count) % count, count)

    def advance(self):
        self._step(1)

    def retreat(self):
        self._step(-1)

    def jump_to(self, index: int):
        with self._lock:
            count = self._state.item_count
            if not 0 <= index < count:
                raise IndexError(f"{self.name}: index {index} out of range for {count} items")
            self._state = CarouselState(index, count)

    # ---------- gestos (touch) ----------
    def touch_start(self, x: float):
        self._gesture.start_x = x
        self._gesture.end_x = None

    def touch_move(self, x: float):
        # só o último valor importa
        self._gesture.end_x = x

    def touch_end(self):
        start, end = self._gesture.start_x, self._gesture.end_x
        self._gesture.reset()
        if start is None or end is None:
            return
        delta = start - end
        if delta > SWIPE_THRESHOLD_PX:
            self.advance()
        elif delta < -SWIPE_THRESHOLD_PX:
            self.retreat()
