from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Protocol

from ..errors import InvalidConfig


Hyphenate = Callable[[str], str]


class HyphenatorFactory(Protocol):
    def __call__(self, language: str) -> Hyphenate:
        ...


@dataclass(frozen=True)
class Backend:
    name: str
    create: HyphenatorFactory
    languages: Callable[[], List[str]]


class BackendRegistry:
    def __init__(self) -> None:
        self._backends: Dict[str, Backend] = {}

    def register(self, backend: Backend) -> None:
        if backend.name in self._backends:
            raise ValueError(f"Hyphenation backend '{backend.name}' is already registered.")
        self._backends[backend.name] = backend

    def get(self, name: str) -> Backend:
        try:
            return self._backends[name]
        except KeyError as exc:
            available = ", ".join(self.names()) or "none"
            raise InvalidConfig(
                f"Hyphenation backend '{name}' is not registered (available: {available})."
            ) from exc

    def names(self) -> List[str]:
        return sorted(self._backends.keys())


backend_registry = BackendRegistry()


def register_backend(backend: Backend) -> None:
    backend_registry.register(backend)


def get_backend(name: str) -> Backend:
    return backend_registry.get(name)


def available_backends() -> List[str]:
    return backend_registry.names()
