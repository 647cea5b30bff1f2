# debug.py
from __future__ import annotations

import logging
from typing import Dict

LOGGER_NAME = "ENIGMA"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

COMPONENTS = ("keyboard", "plugboard", "rotor", "reflector", "stepping", "encipher", "config")


def _attach_handlers(logger: logging.Logger, log_to: str | None) -> None:
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_to:
        handlers.append(logging.FileHandler(log_to, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    # records stop here, never at the root logger
    logger.propagate = False


class Debug:
    """Per-component switches in front of the ``ENIGMA`` logger.

    Each module keeps its own ``debug = Debug()``; the switches and the
    logger behind them are shared, so enabling ``stepping`` from the CLI
    affects every module at once. All components start disabled.
    """

    _handlers_ready: bool = False
    _switches: Dict[str, bool] = {c: False for c in COMPONENTS}
    _global: bool = True

    def __init__(self, *, log_to: str | None = None) -> None:
        self.logger = logging.getLogger(LOGGER_NAME)
        if not Debug._handlers_ready:
            _attach_handlers(self.logger, log_to)
            Debug._handlers_ready = True

    @property
    def components(self) -> Dict[str, bool]:
        return Debug._switches

    @property
    def enabled(self) -> bool:
        return Debug._global

    def log(self, component: str, message: str) -> None:
        if Debug._global and Debug._switches.get(component, False):
            self.logger.debug("[%s] %s", component.upper(), message)

    def enable(self, *components: str) -> None:
        self._set(components, True)

    def disable(self, *components: str) -> None:
        self._set(components, False)

    def toggle(self, component: str) -> None:
        self._set((component,), not self._switches.get(component, False))

    def toggle_global(self, state: bool) -> None:
        Debug._global = state

    def status(self) -> Dict[str, bool]:
        """Copy of the component map."""
        return dict(Debug._switches)

    def _set(self, components, state: bool) -> None:
        unknown = [c for c in components if c not in Debug._switches]
        if unknown:
            raise ValueError(f"No such component: {unknown[0]!r}")
        for c in components:
            Debug._switches[c] = state

    def __repr__(self) -> str:
        active = [k for k, v in Debug._switches.items() if v]
        return f"<Debug enabled={self.enabled} active={active}>"
