import pytest

from refugio_perros.conjunto_perros import ConjuntoPerros


def test_nuevo_conjunto_es_vacio():
    c = ConjuntoPerros(10)
    assert c.es_vacio()
    assert len(c) == 0
    assert c.cant_max == 10


def test_insertar_y_pertenece():
    c = ConjuntoPerros(10)
    c.insertar(3)
    c.insertar(7)
    assert c.pertenece(3)
    assert 7 in c
    assert not c.pertenece(4)
    assert len(c) == 2
    assert not c.es_vacio()


def test_insertar_duplicado_no_cambia_cardinal():
    c = ConjuntoPerros(10)
    c.insertar(5)
    c.insertar(5)
    assert len(c) == 1


@pytest.mark.parametrize("fuera", [-1, 10, 100])
def test_insertar_fuera_de_rango_se_ignora(fuera):
    c = ConjuntoPerros(10)
    c.insertar(fuera)
    assert len(c) == 0
    assert not c.pertenece(fuera)


def test_borrar():
    c = ConjuntoPerros(10, [1, 2, 3])
    c.borrar(2)
    c.borrar(9)
    c.borrar(-5)
    assert list(c) == [1, 3]


def test_iteracion_ascendente():
    c = ConjuntoPerros(100, [75, 7, 42, 29])
    assert list(c) == sorted([75, 7, 42, 29])


def test_describir_ejemplo_documentado():
    c = ConjuntoPerros(100, [7, 42, 29, 75])
    assert c.describir() == "7 29 42 75\n"


def test_describir_vacio():
    assert ConjuntoPerros(5).describir() == "\n"


def test_union_interseccion_diferencia():
    a = ConjuntoPerros(10, [1, 2, 3])
    b = ConjuntoPerros(10, [3, 4])
    assert set(a.union(b)) == {1, 2, 3, 4}
    assert set(a.interseccion(b)) == {3}
    assert set(a.diferencia(b)) == {1, 2}
    assert a.union(b).cant_max == 10


def test_operaciones_no_modifican_operandos():
    a = ConjuntoPerros(10, [1, 2])
    b = ConjuntoPerros(10, [2, 5])
    a.union(b)
    a.diferencia(b)
    assert list(a) == [1, 2]
    assert list(b) == [2, 5]


def test_union_acotada_por_primer_conjunto():
    a = ConjuntoPerros(3, [0])
    b = ConjuntoPerros(10, [1, 8])
    resultado = a.union(b)
    assert list(resultado) == [0, 1]
    assert resultado.cant_max == a.cant_max


def test_cant_max_negativo():
    with pytest.raises(ValueError):
        ConjuntoPerros(-1)