"""A first-in, first-out queue of dogs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from refugio_perros.perro import Perro


class ColaPerros:
    """Queue of dogs in order of arrival."""

    def __init__(self, perros: Iterable[Perro] = ()) -> None:
        self._perros: deque[Perro] = deque(perros)

    def encolar(self, perro: Perro) -> None:
        """Add ``perro`` at the back of the queue."""
        self._perros.append(perro)

    def desencolar(self) -> Perro:
        """Remove and return the oldest dog; IndexError if the queue is empty."""
        if not self._perros:
            raise IndexError("desencolar de una cola vacía")
        return self._perros.popleft()

    def frente(self) -> Perro:
        """Return the oldest dog without removing it; IndexError if empty."""
        if not self._perros:
            raise IndexError("frente de una cola vacía")
        return self._perros[0]

    def __len__(self) -> int:
        return len(self._perros)

    def __iter__(self) -> Iterator[Perro]:
        return iter(self._perros)

    def describir(self) -> str:
        """Text report of every dog, front to back."""
        return "Cola de Perros:\n" + "".join(perro.describir() for perro in self)

    def __repr__(self) -> str:
        return f"ColaPerros({list(self._perros)!r})"