from __future__ import annotations

import threading
import uuid
from collections import OrderedDict
from typing import Callable, Optional, Tuple

from .controller import ViewController

DEFAULT_MAX_SCREENS = 1000


class ScreenRegistry:
    """One ViewController per browser session, keyed by an opaque screen id.

    Least recently used screens are dropped once `max_screens` is reached;
    a dropped session simply gets a fresh screen on its next request.
    """

    def __init__(self, factory: Callable[[], ViewController], *, max_screens: int = DEFAULT_MAX_SCREENS):
        self._factory = factory
        self._max_screens = int(max_screens)
        self._screens: "OrderedDict[str, ViewController]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._screens)

    def get(self, screen_id: Optional[str]) -> Tuple[str, ViewController]:
        with self._lock:
            screen = self._screens.get(screen_id) if screen_id else None
            if screen is None:
                screen_id = uuid.uuid4().hex
                screen = self._factory()
                self._screens[screen_id] = screen
                while len(self._screens) > self._max_screens:
                    self._screens.popitem(last=False)
            else:
                self._screens.move_to_end(screen_id)
            return screen_id, screen
