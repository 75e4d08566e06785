"""A list of dogs kept sorted by age."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator

from refugio_perros.perro import Perro


class ListaPerros:
    """Dogs ordered from youngest to oldest.

    A dog inserted with the same age as others goes before them.
    """

    def __init__(self, perros: Iterable[Perro] = ()) -> None:
        self._perros: list[Perro] = []
        for perro in perros:
            self.insertar(perro)

    def insertar(self, perro: Perro) -> None:
        """Insert ``perro`` before the first dog whose age is not lower."""
        posicion = bisect.bisect_left(self._perros, perro.edad, key=lambda p: p.edad)
        self._perros.insert(posicion, perro)

    def remover_primero(self) -> Perro:
        """Remove and return the youngest dog; IndexError if empty."""
        if not self._perros:
            raise IndexError("remover de una lista vacía")
        return self._perros.pop(0)

    def remover_ultimo(self) -> Perro:
        """Remove and return the oldest dog; IndexError if empty."""
        if not self._perros:
            raise IndexError("remover de una lista vacía")
        return self._perros.pop()

    def _posicion(self, id_perro: int) -> int:
        for posicion, perro in enumerate(self._perros):
            if perro.id == id_perro:
                return posicion
        raise KeyError(id_perro)

    def remover(self, id_perro: int) -> Perro:
        """Remove and return the dog with ``id_perro``; KeyError if absent."""
        return self._perros.pop(self._posicion(id_perro))

    def primero(self) -> Perro:
        """The youngest dog; IndexError if empty."""
        if not self._perros:
            raise IndexError("lista vacía")
        return self._perros[0]

    def ultimo(self) -> Perro:
        """The oldest dog; IndexError if empty."""
        if not self._perros:
            raise IndexError("lista vacía")
        return self._perros[-1]

    def nesimo(self, n: int) -> Perro:
        """The ``n``-th dog counting from 1; IndexError if out of range."""
        if not 1 <= n <= len(self._perros):
            raise IndexError(f"posición fuera de rango: {n}")
        return self._perros[n - 1]

    def existe(self, id_perro: int) -> bool:
        """True if a dog with ``id_perro`` is in the list."""
        return any(perro.id == id_perro for perro in self._perros)

    def __len__(self) -> int:
        return len(self._perros)

    def __iter__(self) -> Iterator[Perro]:
        return iter(self._perros)

    def __reversed__(self) -> Iterator[Perro]:
        return reversed(self._perros)

    def describir(self, invertido: bool = False) -> str:
        """Text report of the dogs, youngest first unless ``invertido``."""
        perros = reversed(self) if invertido else iter(self)
        return "LDE Perros:\n" + "".join(perro.describir() for perro in perros)

    def __repr__(self) -> str:
        return f"ListaPerros({self._perros!r})"