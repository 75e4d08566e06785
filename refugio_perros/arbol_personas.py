"""Binary search tree of people ordered by ``ci``."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

from refugio_perros.fecha import Fecha
from refugio_perros.persona import Persona


@dataclass
class _Nodo:
    persona: Persona
    izq: Optional[_Nodo] = None
    der: Optional[_Nodo] = None


def _signo(valor: int) -> int:
    return (valor > 0) - (valor < 0)


def _cantidad(nodo: Optional[_Nodo]) -> int:
    if nodo is None:
        return 0
    return 1 + _cantidad(nodo.izq) + _cantidad(nodo.der)


def _altura(nodo: Optional[_Nodo]) -> int:
    if nodo is None:
        return 0
    return 1 + max(_altura(nodo.izq), _altura(nodo.der))


def _maximo(nodo: _Nodo) -> Persona:
    while nodo.der is not None:
        nodo = nodo.der
    return nodo.persona


def _en_orden(nodo: Optional[_Nodo]) -> Iterator[Persona]:
    if nodo is not None:
        yield from _en_orden(nodo.izq)
        yield nodo.persona
        yield from _en_orden(nodo.der)


def _insertar(nodo: Optional[_Nodo], persona: Persona) -> _Nodo:
    if nodo is None:
        return _Nodo(persona)
    if persona.ci < nodo.persona.ci:
        nodo.izq = _insertar(nodo.izq, persona)
    else:
        nodo.der = _insertar(nodo.der, persona)
    return nodo


def _remover(nodo: Optional[_Nodo], ci: int) -> Optional[_Nodo]:
    if nodo is None:
        raise KeyError(ci)
    if ci == nodo.persona.ci:
        if nodo.izq is None:
            return nodo.der
        if nodo.der is None:
            return nodo.izq
        nodo.persona = _maximo(nodo.izq).copia()
        nodo.izq = _remover(nodo.izq, nodo.persona.ci)
    elif ci > nodo.persona.ci:
        nodo.der = _remover(nodo.der, ci)
    else:
        nodo.izq = _remover(nodo.izq, ci)
    return nodo


def _filtrar(nodo: Optional[_Nodo], fecha: Fecha, criterio: int) -> Optional[_Nodo]:
    if nodo is None:
        return None
    izq = _filtrar(nodo.izq, fecha, criterio)
    der = _filtrar(nodo.der, fecha, criterio)
    comparacion = nodo.persona.nacimiento.comparar(fecha)
    if _signo(comparacion) == _signo(criterio):
        return _Nodo(nodo.persona.copia(), izq, der)
    if izq is None:
        return der
    if der is None:
        return izq
    reemplazo = _maximo(izq).copia()
    izq = _remover(izq, reemplazo.ci)
    return _Nodo(reemplazo, izq, der)


class ArbolPersonas:
    """People kept in a binary search tree keyed by ``ci``."""

    def __init__(self, personas: Iterable[Persona] = ()) -> None:
        self._raiz: Optional[_Nodo] = None
        for persona in personas:
            self.insertar(persona)

    @classmethod
    def _desde_raiz(cls, raiz: Optional[_Nodo]) -> ArbolPersonas:
        arbol = cls()
        arbol._raiz = raiz
        return arbol

    def _buscar(self, ci: int) -> Optional[_Nodo]:
        nodo = self._raiz
        while nodo is not None and nodo.persona.ci != ci:
            nodo = nodo.izq if ci < nodo.persona.ci else nodo.der
        return nodo

    def insertar(self, persona: Persona) -> None:
        """Insert ``persona`` in ``ci`` order."""
        self._raiz = _insertar(self._raiz, persona)

    def existe(self, ci: int) -> bool:
        """True if a person with ``ci`` is in the tree."""
        return self._buscar(ci) is not None

    def obtener(self, ci: int) -> Persona:
        """The person with ``ci``; KeyError if absent."""
        nodo = self._buscar(ci)
        if nodo is None:
            raise KeyError(ci)
        return nodo.persona

    def altura(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 when empty."""
        return _altura(self._raiz)

    def maximo(self) -> Persona:
        """The person with the largest ``ci``; ValueError if the tree is empty."""
        if self._raiz is None:
            raise ValueError("árbol vacío")
        return _maximo(self._raiz)

    def remover(self, ci: int) -> None:
        """Remove the person with ``ci``; KeyError if absent.

        A node with two children takes a copy of the person with the largest
        ``ci`` in its left subtree.
        """
        self._raiz = _remover(self._raiz, ci)

    def nesima(self, n: int) -> Persona:
        """The ``n``-th person by ascending ``ci``, counting from 1."""
        if not 1 <= n <= len(self):
            raise IndexError(f"posición fuera de rango: {n}")
        nodo = self._raiz
        while nodo is not None:
            nodos_izq = _cantidad(nodo.izq)
            if n == nodos_izq + 1:
                return nodo.persona
            if n <= nodos_izq:
                nodo = nodo.izq
            else:
                n -= nodos_izq + 1
                nodo = nodo.der
        raise IndexError(n)

    def filtrar_por_nacimiento(self, fecha: Fecha, criterio: int) -> ArbolPersonas:
        """New tree with copies of the people born before, on or after ``fecha``.

        A negative ``criterio`` keeps earlier births, zero keeps the same date
        and a positive value keeps later births.
        """
        return self._desde_raiz(_filtrar(self._raiz, fecha, criterio))

    def __len__(self) -> int:
        return _cantidad(self._raiz)

    def __iter__(self) -> Iterator[Persona]:
        return _en_orden(self._raiz)

    def describir(self) -> str:
        """Text report of every person in ascending ``ci`` order."""
        return "".join(persona.describir() for persona in self)

    def __repr__(self) -> str:
        return f"ArbolPersonas({list(self)!r})"