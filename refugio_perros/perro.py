"""Dogs held by the shelter."""

from __future__ import annotations

from dataclasses import dataclass

from refugio_perros.fecha import Fecha

MAX_NOMBRE = 50
MAX_DESCRIPCION = 100


@dataclass
class Perro:
    """A dog with its identifier, age, vitality and date of arrival."""

    id: int
    nombre: str
    edad: int
    vitalidad: int
    descripcion: str
    ingreso: Fecha

    def copia(self) -> Perro:
        """Return a copy that shares no mutable state with this dog."""
        return Perro(
            self.id,
            self.nombre,
            self.edad,
            self.vitalidad,
            self.descripcion,
            self.ingreso.copia(),
        )

    def describir(self) -> str:
        """Multi-line text report of the dog, ending in a newline."""
        return (
            f"Perro {self.id}\n"
            f"Nombre: {self.nombre}\n"
            f"Edad: {self.edad}\n"
            f"Descripcion: {self.descripcion}\n"
            f"Fecha de ingreso: {self.ingreso}\n"
            f"Vitalidad: {self.vitalidad}\n"
        )