"""People registered with the shelter and the dogs they adopted."""

from __future__ import annotations

from dataclasses import dataclass, field

from refugio_perros.fecha import Fecha
from refugio_perros.perro import Perro

MAX_NOMBRE_PERSONA = 100
MAX_APELLIDO_PERSONA = 100
MAX_PERROS_PERSONA = 5


@dataclass
class Persona:
    """A person identified by ``ci``, with a birth date and adopted dogs."""

    ci: int
    nombre: str
    apellido: str
    nacimiento: Fecha
    perros: list[Perro] = field(default_factory=list)

    def agregar_perro(self, perro: Perro) -> bool:
        """Store a copy of ``perro``; return False if the limit is already reached."""
        if len(self.perros) >= MAX_PERROS_PERSONA:
            return False
        self.perros.append(perro.copia())
        return True

    def tiene_perro(self, id_perro: int) -> bool:
        """True if a dog with ``id_perro`` is among the adopted dogs."""
        return any(perro.id == id_perro for perro in self.perros)

    def cantidad_perros(self) -> int:
        """Number of adopted dogs."""
        return len(self.perros)

    def copia(self) -> Persona:
        """Return a copy that shares no mutable state with this person."""
        return Persona(
            self.ci,
            self.nombre,
            self.apellido,
            self.nacimiento.copia(),
            [perro.copia() for perro in self.perros],
        )

    def describir(self) -> str:
        """Multi-line text report of the person and their dogs."""
        cabecera = (
            f"Persona {self.nombre} {self.apellido}\n"
            f"CI: {self.ci}\n"
            f"Fecha de Nacimiento: {self.nacimiento}\n"
            "Perros adoptados:\n"
        )
        return cabecera + "".join(perro.describir() for perro in self.perros)