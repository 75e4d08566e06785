import pytest

from refugio_perros.fecha import Fecha
from refugio_perros.lista_perros import ListaPerros
from refugio_perros.perro import Perro


def _perro(id_perro, edad, vitalidad=5):
    return Perro(id_perro, f"Perro{id_perro}", edad, vitalidad, "desc", Fecha(1, 1, 2020))


def _lista(*pares):
    lista = ListaPerros()
    for id_perro, edad in pares:
        lista.insertar(_perro(id_perro, edad))
    return lista


def test_lista_vacia():
    lista = ListaPerros()
    assert len(lista) == 0
    for operacion in (lista.primero, lista.ultimo, lista.remover_primero, lista.remover_ultimo):
        with pytest.raises(IndexError):
            operacion()


def test_insertar_ordena_por_edad():
    lista = _lista((1, 5), (2, 1), (3, 9), (4, 3))
    edades = [p.edad for p in lista]
    assert edades == sorted(edades)
    assert len(lista) == 4
    assert lista.primero().id == 2
    assert lista.ultimo().id == 3


def test_misma_edad_va_antes():
    lista = _lista((1, 4), (2, 4), (3, 4))
    assert [p.id for p in lista] == [3, 2, 1]


def test_misma_edad_entre_otras():
    lista = _lista((1, 2), (2, 6), (3, 4), (4, 4))
    assert [p.id for p in lista] == [1, 4, 3, 2]


def test_reversed():
    lista = _lista((1, 5), (2, 1), (3, 9))
    assert [p.id for p in reversed(lista)] == list(reversed([p.id for p in lista]))


def test_remover_primero_y_ultimo():
    lista = _lista((1, 5), (2, 1), (3, 9))
    assert lista.remover_primero().id == 2
    assert lista.remover_ultimo().id == 3
    assert len(lista) == 1
    assert lista.primero() is lista.ultimo()


def test_remover_por_id():
    lista = _lista((1, 5), (2, 1), (3, 9))
    removido = lista.remover(1)
    assert removido.id == 1
    assert not lista.existe(1)
    assert [p.id for p in lista] == [2, 3]


def test_remover_inexistente():
    lista = _lista((1, 5))
    with pytest.raises(KeyError):
        lista.remover(42)


def test_nesimo():
    lista = _lista((1, 5), (2, 1), (3, 9))
    assert [lista.nesimo(n).id for n in (1, 2, 3)] == [p.id for p in lista]


@pytest.mark.parametrize("n", [0, -1, 4])
def test_nesimo_fuera_de_rango(n):
    lista = _lista((1, 5), (2, 1), (3, 9))
    with pytest.raises(IndexError):
        lista.nesimo(n)


def test_existe():
    lista = _lista((10, 5), (20, 1))
    assert lista.existe(10)
    assert lista.existe(20)
    assert not lista.existe(30)


def test_describir_en_ambos_sentidos():
    a, b = _perro(1, 1), _perro(2, 8)
    lista = ListaPerros([b, a])
    assert lista.describir() == "LDE Perros:\n" + a.describir() + b.describir()
    assert lista.describir(True) == "LDE Perros:\n" + b.describir() + a.describir()


def test_describir_vacia():
    assert ListaPerros().describir() == "LDE Perros:\n"