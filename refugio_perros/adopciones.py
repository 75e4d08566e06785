"""Adoptions recorded by the shelter, kept in order of adoption date."""

from __future__ import annotations

import bisect
from collections.abc import Iterator
from dataclasses import dataclass

from refugio_perros.fecha import Fecha
from refugio_perros.perro import Perro
from refugio_perros.persona import Persona

_SEPARADOR = "---------------------------\n"


@dataclass
class Adopcion:
    """A person adopting a dog on a given date."""

    fecha: Fecha
    persona: Persona
    perro: Perro

    def corresponde(self, ci_persona: int, id_perro: int) -> bool:
        """True if this adoption is of dog ``id_perro`` by person ``ci_persona``."""
        return self.persona.ci == ci_persona and self.perro.id == id_perro

    def describir(self) -> str:
        """Text report of the adoption, framed by separator lines."""
        return (
            _SEPARADOR
            + f"Adopcion en fecha {self.fecha}\n"
            + "Adoptante:\n"
            + f"Persona {self.persona.nombre} {self.persona.apellido}\n"
            + f"CI: {self.persona.ci}\n"
            + "Adoptado:\n"
            + f"Perro {self.perro.id}\n"
            + f"Nombre: {self.perro.nombre}\n"
            + f"Fecha de ingreso: {self.perro.ingreso}\n"
            + _SEPARADOR
        )


class ListaAdopciones:
    """Adoptions ordered from the earliest date to the latest.

    An adoption is identified by the person's ``ci`` and the dog's ``id``.
    Adoptions on the same date keep the order in which they were inserted.
    """

    def __init__(self) -> None:
        self._adopciones: list[Adopcion] = []

    def insertar(self, fecha: Fecha, persona: Persona, perro: Perro) -> None:
        """Record an adoption after every adoption with an earlier or equal date."""
        adopcion = Adopcion(fecha, persona, perro)
        posicion = bisect.bisect_right(
            self._adopciones, fecha, key=lambda a: a.fecha
        )
        self._adopciones.insert(posicion, adopcion)

    def existe(self, ci_persona: int, id_perro: int) -> bool:
        """True if the person ``ci_persona`` adopted the dog ``id_perro``."""
        return any(a.corresponde(ci_persona, id_perro) for a in self._adopciones)

    def remover(self, ci_persona: int, id_perro: int) -> Adopcion:
        """Remove and return the matching adoption; KeyError if there is none."""
        for posicion, adopcion in enumerate(self._adopciones):
            if adopcion.corresponde(ci_persona, id_perro):
                return self._adopciones.pop(posicion)
        raise KeyError((ci_persona, id_perro))

    def es_vacia(self) -> bool:
        """True if no adoption is recorded."""
        return not self._adopciones

    def __iter__(self) -> Iterator[Adopcion]:
        return iter(self._adopciones)

    def __len__(self) -> int:
        return len(self._adopciones)

    def describir(self) -> str:
        """Text report of every adoption in date order; empty if there are none."""
        return "".join(adopcion.describir() for adopcion in self._adopciones)

    def __repr__(self) -> str:
        return f"ListaAdopciones({self._adopciones!r})"