"""Exercises built only on the public operations of the shelter's containers."""

from __future__ import annotations

from refugio_perros.cola_perros import ColaPerros
from refugio_perros.conjunto_perros import ConjuntoPerros
from refugio_perros.lista_perros import ListaPerros
from refugio_perros.pila import Pila


def mismos_elementos(pila: Pila, cola: ColaPerros) -> bool:
    """True if ``pila`` and ``cola`` got the same dog ids in the same order.

    Both containers are left empty.
    """
    apilados = []
    while len(pila):
        apilados.append(pila.desapilar())
    apilados.reverse()
    encolados = []
    while len(cola):
        encolados.append(cola.desencolar().id)
    return apilados == encolados


def menores_que_el_resto(lista: ListaPerros) -> Pila:
    """Stack of vitalities lower than every vitality that follows them in ``lista``.

    They are pushed in list order, so the top holds the highest one.
    ``lista`` is left empty.
    """
    vitalidades = []
    while len(lista):
        vitalidades.append(lista.remover_primero().vitalidad)
    elegidas = []
    minimo_resto = None
    for vitalidad in reversed(vitalidades):
        if minimo_resto is None or vitalidad < minimo_resto:
            elegidas.append(vitalidad)
            minimo_resto = vitalidad
    return Pila(reversed(elegidas))


def suma_pares(k: int, conjunto: ConjuntoPerros) -> bool:
    """True if two ids of ``conjunto`` (possibly the same one) add up to ``k``."""
    return any((k - id_perro) in conjunto for id_perro in conjunto)