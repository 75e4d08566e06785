"""Data structures for a dog shelter: dates, dogs, people, adoptions, vaccination schemes, stacks, queues and sets."""

__version__ = "0.1.0"

__all__ = [
    "adopciones",
    "aplicaciones",
    "arbol_personas",
    "cola_perros",
    "cola_prioridad",
    "conjunto_perros",
    "fecha",
    "ficha_vacunacion",
    "lista_perros",
    "perro",
    "persona",
    "pila",
]