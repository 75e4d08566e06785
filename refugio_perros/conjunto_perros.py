"""Bounded sets of dog identifiers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class ConjuntoPerros:
    """Set of dog ids, each satisfying ``0 <= id < cant_max``."""

    def __init__(self, cant_max: int, ids: Iterable[int] = ()) -> None:
        if cant_max < 0:
            raise ValueError("cant_max must be non-negative")
        self._cant_max = cant_max
        self._ids: set[int] = set()
        for id_perro in ids:
            self.insertar(id_perro)

    @property
    def cant_max(self) -> int:
        """Upper bound (exclusive) of the ids the set can hold."""
        return self._cant_max

    def _en_rango(self, id_perro: int) -> bool:
        return 0 <= id_perro < self._cant_max

    def insertar(self, id_perro: int) -> None:
        """Add ``id_perro``; ids outside the valid range are ignored."""
        if self._en_rango(id_perro):
            self._ids.add(id_perro)

    def borrar(self, id_perro: int) -> None:
        """Remove ``id_perro`` if present; otherwise do nothing."""
        self._ids.discard(id_perro)

    def pertenece(self, id_perro: int) -> bool:
        """True if ``id_perro`` is in the set."""
        return id_perro in self._ids

    def __contains__(self, id_perro: object) -> bool:
        return id_perro in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._ids))

    def es_vacio(self) -> bool:
        """True if the set holds no ids."""
        return not self._ids

    def _con(self, ids: Iterable[int]) -> ConjuntoPerros:
        return ConjuntoPerros(self._cant_max, ids)

    def union(self, otro: ConjuntoPerros) -> ConjuntoPerros:
        """Ids in either set, bounded by this set's ``cant_max``."""
        return self._con(self._ids | otro._ids)

    def interseccion(self, otro: ConjuntoPerros) -> ConjuntoPerros:
        """Ids in both sets, bounded by this set's ``cant_max``."""
        return self._con(self._ids & otro._ids)

    def diferencia(self, otro: ConjuntoPerros) -> ConjuntoPerros:
        """Ids in this set but not in ``otro``."""
        return self._con(self._ids - otro._ids)

    def describir(self) -> str:
        """Ids in ascending order separated by spaces, ending in a newline."""
        return " ".join(str(id_perro) for id_perro in self) + "\n"

    def __repr__(self) -> str:
        return f"ConjuntoPerros({self._cant_max}, {sorted(self._ids)!r})"