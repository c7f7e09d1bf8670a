# debug.py
from __future__ import annotations
import logging
from typing import Dict

COMPONENTS = ("plugboard", "rotor", "reflector", "stepping", "encipher", "config")


class Debug:
    _root_configured: bool = False          # class-level guard
    _components: Dict[str, bool] = {c: False for c in COMPONENTS}

    def __init__(self) -> None:
        """
        Every Debug() instance shares the root logger config and the
        component switches, so toggling one channel affects all modules.
        """
        if not Debug._root_configured:
            logging.basicConfig(
                level=logging.WARNING,
                format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            Debug._root_configured = True

        self.logger = logging.getLogger("ENIGMA")

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if Debug._components.get(component, False):
            self.logger.debug("[%s] %s", component.upper(), message)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug._components[c] = True
        if any(Debug._components.values()):
            self.logger.setLevel(logging.DEBUG)

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug._components[c] = False
        if not any(Debug._components.values()):
            self.logger.setLevel(logging.NOTSET)

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return Debug._components.copy()

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in Debug._components:
            raise ValueError(f"No such component: {component!r}")

    def __repr__(self) -> str:
        active = [k for k, v in Debug._components.items() if v]
        return f"<Debug active={active}>"
