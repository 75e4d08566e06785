"""Vaccination schemes kept as a general tree of vaccine codes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

RAIZ = -1
_SANGRIA = "    "


@dataclass
class _Nodo:
    codigo: int
    hijos: list[_Nodo] = field(default_factory=list)

    def buscar(self, codigo: int) -> Optional[_Nodo]:
        if self.codigo == codigo:
            return self
        for hijo in self.hijos:
            encontrado = hijo.buscar(codigo)
            if encontrado is not None:
                return encontrado
        return None

    def altura(self) -> int:
        return 1 + max((hijo.altura() for hijo in self.hijos), default=0)

    def cantidad(self) -> int:
        return 1 + sum(hijo.cantidad() for hijo in self.hijos)

    def remover(self, codigo: int) -> bool:
        for posicion, hijo in enumerate(self.hijos):
            if hijo.codigo == codigo:
                del self.hijos[posicion]
                return True
        return any(hijo.remover(codigo) for hijo in self.hijos)

    def lineas(self, nivel: int) -> Iterator[str]:
        yield f"{_SANGRIA * nivel}{self.codigo}\n"
        for hijo in self.hijos:
            yield from hijo.lineas(nivel + 1)

    def padres(self, padre: int) -> Iterator[tuple[int, int]]:
        yield self.codigo, padre
        for hijo in self.hijos:
            yield from hijo.padres(self.codigo)


class FichaVacunacion:
    """Tree of vaccine codes; each vaccine hangs from the one it follows.

    A new vaccine becomes the first child of its parent, so the most
    recently added sibling comes first.
    """

    def __init__(self) -> None:
        self._raiz: Optional[_Nodo] = None

    def insertar(self, cod_padre: int, cod_vacuna: int) -> None:
        """Add ``cod_vacuna`` under ``cod_padre``; ``cod_padre == -1`` adds the root.

        Raises ValueError when the code is already present or the root is
        misplaced, and KeyError when the parent is not in the tree.
        """
        if self.existe(cod_vacuna):
            raise ValueError(f"la vacuna {cod_vacuna} ya está en la ficha")
        if cod_padre == RAIZ:
            if self._raiz is not None:
                raise ValueError("la ficha ya tiene una vacuna raíz")
            self._raiz = _Nodo(cod_vacuna)
            return
        if self._raiz is None:
            raise ValueError("la primera vacuna debe insertarse como raíz")
        padre = self._raiz.buscar(cod_padre)
        if padre is None:
            raise KeyError(cod_padre)
        padre.hijos.insert(0, _Nodo(cod_vacuna))

    def existe(self, cod_vacuna: int) -> bool:
        """True if ``cod_vacuna`` is in the scheme."""
        return self._raiz is not None and self._raiz.buscar(cod_vacuna) is not None

    def __contains__(self, cod_vacuna: object) -> bool:
        return isinstance(cod_vacuna, int) and self.existe(cod_vacuna)

    def altura(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return 0 if self._raiz is None else self._raiz.altura()

    def __len__(self) -> int:
        return 0 if self._raiz is None else self._raiz.cantidad()

    def remover(self, cod_vacuna: int) -> None:
        """Remove ``cod_vacuna`` and every vaccine below it; KeyError if absent."""
        if self._raiz is None:
            raise KeyError(cod_vacuna)
        if self._raiz.codigo == cod_vacuna:
            self._raiz = None
        elif not self._raiz.remover(cod_vacuna):
            raise KeyError(cod_vacuna)

    def _mapa_padres(self) -> dict[int, int]:
        if self._raiz is None:
            return {}
        return dict(self._raiz.padres(RAIZ))

    def iguales(self, otra: FichaVacunacion) -> bool:
        """True if both schemes hold the same vaccines, each under the same parent."""
        return self._mapa_padres() == otra._mapa_padres()

    def describir(self) -> str:
        """Indented listing of the scheme, four spaces per level."""
        cuerpo = "" if self._raiz is None else "".join(self._raiz.lineas(0))
        return "Ficha Vacunacion:\n" + cuerpo

    def __repr__(self) -> str:
        return f"FichaVacunacion({self._mapa_padres()!r})"