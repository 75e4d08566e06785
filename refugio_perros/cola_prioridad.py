"""Priority queues of dogs ordered by vitality."""

from __future__ import annotations

import heapq
import itertools

from refugio_perros.perro import Perro


class ColaPrioridadPerros:
    """Dogs with ids in ``1..n``, lowest vitality first unless inverted."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self._perros: dict[int, Perro] = {}
        self._heap: list[tuple[int, int, int]] = []
        self._orden = itertools.count()
        self._signo = 1

    def _entrada(self, perro: Perro, secuencia: int) -> tuple[int, int, int]:
        return (self._signo * perro.vitalidad, secuencia, perro.id)

    def insertar(self, perro: Perro) -> None:
        """Add ``perro``; ValueError if its id is out of range or already present."""
        if not 1 <= perro.id <= self._n:
            raise ValueError(f"id fuera de rango: {perro.id}")
        if perro.id in self._perros:
            raise ValueError(f"el perro {perro.id} ya está en la cola")
        self._perros[perro.id] = perro
        heapq.heappush(self._heap, self._entrada(perro, next(self._orden)))

    def contiene(self, id_perro: int) -> bool:
        """True if the dog ``id_perro`` is in the queue."""
        return id_perro in self._perros

    def prioridad(self, id_perro: int) -> int:
        """Vitality of the dog ``id_perro``; KeyError if absent."""
        return self._perros[id_perro].vitalidad

    def prioritario(self) -> Perro:
        """The dog with the highest priority; IndexError if the queue is empty."""
        if not self._heap:
            raise IndexError("cola de prioridad vacía")
        return self._perros[self._heap[0][2]]

    def eliminar_prioritario(self) -> None:
        """Remove the dog with the highest priority; no effect when empty."""
        if self._heap:
            _, _, id_perro = heapq.heappop(self._heap)
            del self._perros[id_perro]

    def invertir_prioridad(self) -> None:
        """Switch between lowest-vitality-first and highest-vitality-first."""
        self._signo = -self._signo
        self._heap = [
            (self._signo * self._perros[id_perro].vitalidad, secuencia, id_perro)
            for _, secuencia, id_perro in self._heap
        ]
        heapq.heapify(self._heap)

    def es_vacia(self) -> bool:
        """True if the queue holds no dogs."""
        return not self._perros

    def __len__(self) -> int:
        return len(self._perros)

    def __repr__(self) -> str:
        return f"ColaPrioridadPerros({self._n}, {sorted(self._perros)!r})"