from __future__ import annotations

import logging
import threading

from chat_proxy.core.errors import InvalidModel
from chat_proxy.core.settings import AVAILABLE_MODELS, DEFAULT_MODEL

logger = logging.getLogger(__name__)


class ModelRegistry:
    """
    Fixed set of provider models plus the one currently used for completions.

    The current model is the only mutable state of the service. It is kept
    behind a lock because sync endpoints run on FastAPI's thread pool while
    chat requests read it from the event loop.
    """

    def __init__(
        self,
        models: dict[str, str] | None = None,
        current: str = DEFAULT_MODEL,
    ):
        self._models = dict(models if models is not None else AVAILABLE_MODELS)
        if current not in self._models.values():
            raise ValueError(f"Unknown default model: {current}")
        self._current = current
        self._lock = threading.Lock()

    @property
    def models(self) -> dict[str, str]:
        return dict(self._models)

    @property
    def current(self) -> str:
        with self._lock:
            return self._current

    def is_known(self, model: object) -> bool:
        return model in self._models.values()

    def select(self, model: object) -> str:
        if not self.is_known(model):
            raise InvalidModel(model)

        with self._lock:
            previous, self._current = self._current, model

        if previous != model:
            logger.info("Current model changed from %s to %s", previous, model)
        return model
