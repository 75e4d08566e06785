"""A last-in, first-out stack of integers."""

from __future__ import annotations

from collections.abc import Iterable


class Pila:
    """Stack of integers."""

    def __init__(self, elementos: Iterable[int] = ()) -> None:
        self._elementos: list[int] = list(elementos)

    def apilar(self, elem: int) -> None:
        """Push ``elem`` on top of the stack."""
        self._elementos.append(elem)

    def desapilar(self) -> int:
        """Remove and return the top element; IndexError if the stack is empty."""
        if not self._elementos:
            raise IndexError("desapilar de una pila vacía")
        return self._elementos.pop()

    def cima(self) -> int:
        """Return the top element without removing it; IndexError if empty."""
        if not self._elementos:
            raise IndexError("cima de una pila vacía")
        return self._elementos[-1]

    def __len__(self) -> int:
        return len(self._elementos)

    def describir(self) -> str:
        """Elements from the first pushed to the last, as ``Pila: a b c``."""
        return "Pila:" + "".join(f" {elem}" for elem in self._elementos) + "\n"

    def __repr__(self) -> str:
        return f"Pila({self._elementos!r})"