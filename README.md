# refugio_perros

Collections for keeping track of a dog shelter. The package has calendar
dates, dogs, and people with the dogs they adopted. It also has a stack of
integers, a queue and a priority queue of dogs, and a bounded set of dog ids.
Dogs can be kept in a list sorted by age. Adoptions go in a log sorted by
date. People go in a binary search tree keyed by ID number (`ci`).
Vaccination schemes are a general tree of vaccine codes.

Every `describir` method returns its report as a string. Nothing is printed.

## Installation

```
pip install .
```

## Modules

- `refugio_perros.fecha`: `Fecha(dia, mes, anio)`, `es_bisiesto(anio)` and
  `dias_mes(mes, anio)`.
  - `Fecha.aumentar(dias)` moves the date forward and rolls over months and
    years. A negative count raises `ValueError`.
  - `Fecha.comparar(otra)` returns -1, 0 or 1. Dates also support `<`, `>`
    and the other comparisons.
  - `Fecha.copia()` returns an independent copy.
  - `str(fecha)` gives `d/m/yyyy`.
- `refugio_perros.perro`: `Perro(id, nombre, edad, vitalidad, descripcion,
  ingreso)`, with `copia()` and `describir()`.
- `refugio_perros.persona`: `Persona(ci, nombre, apellido, nacimiento)`.
  - `agregar_perro(perro)` stores a copy of the dog. A person holds at most
    five dogs. Once the limit is reached the method returns `False` and
    stores nothing.
  - Also has `tiene_perro`, `cantidad_perros`, `copia` and `describir`.
- `refugio_perros.pila`: `Pila`, a stack of integers.
  - Methods: `apilar`, `desapilar`, `cima`, `len()` and `describir()`.
  - `describir()` lists the elements from the first pushed to the last.
  - `desapilar` and `cima` raise `IndexError` on an empty stack.
- `refugio_perros.conjunto_perros`: `ConjuntoPerros(cant_max)`, a set of ids
  with `0 <= id < cant_max`.
  - `insertar` ignores ids outside that range.
  - Supports `in`, `len()`, and iteration in ascending order.
  - Also has `es_vacio`, `borrar`, `union`, `interseccion`, `diferencia` and
    `describir`.
  - Results of `union`, `interseccion` and `diferencia` keep the `cant_max`
    of the set the method is called on.
- `refugio_perros.cola_perros`: `ColaPerros`, a first-in, first-out queue of
  dogs.
  - Methods: `encolar`, `desencolar`, `frente`, `len()`, iteration and
    `describir`.
- `refugio_perros.lista_perros`: `ListaPerros`, dogs sorted from youngest to
  oldest. A new dog goes in front of others of the same age.
  - Methods: `remover_primero`, `remover_ultimo`, `remover(id_perro)`,
    `primero`, `ultimo`, `nesimo(n)` (counting from 1), `existe`, iteration,
    `reversed()` and `describir(invertido=False)`.
- `refugio_perros.adopciones`: `Adopcion` and `ListaAdopciones`.
  - The list is sorted by adoption date. A new adoption goes after others on
    the same date.
  - Methods: `insertar(fecha, persona, perro)`, `existe(ci_persona,
    id_perro)`, `remover(ci_persona, id_perro)`, `es_vacia`, iteration,
    `len()` and `describir`.
  - `remover` raises `KeyError` when there is no matching adoption.
- `refugio_perros.arbol_personas`: `ArbolPersonas`, a binary search tree keyed
  by `ci`.
  - Methods: `insertar`, `existe`, `obtener`, `altura`, `maximo`,
    `remover`, `nesima(n)` (by ascending `ci`, from 1), `len()`, in-order
    iteration and `describir`.
  - `remover` replaces a node that has two children with a copy of the
    person with the largest `ci` in its left subtree.
  - `filtrar_por_nacimiento(fecha, criterio)` returns a new tree of copies.
    A negative `criterio` keeps people born before `fecha`, zero keeps those
    born on it, and a positive value keeps those born after it.
- `refugio_perros.ficha_vacunacion`: `FichaVacunacion`, a general tree of
  vaccine codes.
  - `insertar(cod_padre, cod_vacuna)` adds a vaccine as the first child of
    its parent. A `cod_padre` of `-1` adds the root.
  - Also has `existe`, `in`, `altura`, `len()`, `remover`, `iguales` and
    `describir`.
  - `remover` drops the vaccine and everything below it.
  - `iguales` is true when both trees hold the same codes, each under the
    same parent.
  - `describir` indents four spaces per level.
- `refugio_perros.aplicaciones`:
  - `mismos_elementos(pila, cola)`: true if a `Pila` of ids and a
    `ColaPerros` received the same ids in the same order. Both are emptied.
  - `menores_que_el_resto(lista)`: returns a `Pila` of the vitalities that
    are lower than every vitality after them in a `ListaPerros`. The
    highest is on top, and the list is emptied.
  - `suma_pares(k, conjunto)`: true if two ids of a `ConjuntoPerros` add up
    to `k`. The two ids may be the same one.
- `refugio_perros.cola_prioridad`: `ColaPrioridadPerros(n)`, dogs with ids in
  `1..n` prioritised by vitality, lowest first.
  - `invertir_prioridad()` switches between lowest-first and highest-first.
  - Dogs with equal vitality come out in insertion order.
  - Also has `insertar`, `contiene`, `prioridad`, `prioritario`,
    `eliminar_prioritario`, `es_vacia` and `len()`.

## Example

```python
from refugio_perros.fecha import Fecha
from refugio_perros.perro import Perro
from refugio_perros.lista_perros import ListaPerros

lista = ListaPerros()
lista.insertar(Perro(1, "Toby", 3, 50, "manso", Fecha(1, 2, 2024)))
lista.insertar(Perro(2, "Luna", 1, 70, "juguetona", Fecha(5, 3, 2024)))
print(lista.primero().nombre)  # Luna
print(lista.describir())
```

## What the package does not do

These are separate building blocks. There is no shelter object that ties
them together. Nothing registers a person, takes in a dog, records an
adoption and vaccinates the dog in one step, and there is no table that
maps each dog to its vaccination scheme. There is no command-line program.
Data lives only in memory and is not saved anywhere.

## Tests

```
pip install .[test]
pytest
```