import pytest

from refugio_perros.ficha_vacunacion import FichaVacunacion


def _ficha():
    ficha = FichaVacunacion()
    ficha.insertar(-1, 1)
    ficha.insertar(1, 2)
    ficha.insertar(1, 3)
    ficha.insertar(2, 4)
    return ficha


def test_empty_scheme():
    ficha = FichaVacunacion()
    assert len(ficha) == 0
    assert ficha.altura() == 0
    assert ficha.describir() == "Ficha Vacunacion:\n"
    assert not ficha.existe(1)


def test_insert_counts_and_height():
    ficha = _ficha()
    assert len(ficha) == 4
    assert ficha.altura() == 3
    assert all(ficha.existe(c) for c in (1, 2, 3, 4))
    assert 5 not in ficha
    assert 4 in ficha


def test_describir_newest_sibling_first():
    assert _ficha().describir() == (
        "Ficha Vacunacion:\n1\n    3\n    2\n        4\n"
    )


def test_remover_subtree():
    ficha = _ficha()
    ficha.remover(2)
    assert len(ficha) == 2
    assert not ficha.existe(4)
    assert ficha.existe(3)
    assert ficha.altura() == 2


def test_remover_root_empties():
    ficha = _ficha()
    ficha.remover(1)
    assert len(ficha) == 0
    assert ficha.describir() == "Ficha Vacunacion:\n"


def test_remover_missing():
    with pytest.raises(KeyError):
        _ficha().remover(99)
    with pytest.raises(KeyError):
        FichaVacunacion().remover(1)


def test_insert_errors():
    ficha = FichaVacunacion()
    with pytest.raises(ValueError):
        ficha.insertar(1, 2)
    ficha.insertar(-1, 1)
    with pytest.raises(ValueError):
        ficha.insertar(-1, 7)
    with pytest.raises(KeyError):
        ficha.insertar(42, 7)
    with pytest.raises(ValueError):
        ficha.insertar(1, 1)


def test_iguales_ignores_insertion_order():
    otra = FichaVacunacion()
    otra.insertar(-1, 1)
    otra.insertar(1, 3)
    otra.insertar(1, 2)
    otra.insertar(2, 4)
    assert _ficha().iguales(otra)
    assert otra.iguales(_ficha())


def test_iguales_different_parent():
    otra = FichaVacunacion()
    otra.insertar(-1, 1)
    otra.insertar(1, 2)
    otra.insertar(1, 3)
    otra.insertar(3, 4)
    assert not _ficha().iguales(otra)


def test_iguales_empty_and_nonempty():
    assert FichaVacunacion().iguales(FichaVacunacion())
    assert not FichaVacunacion().iguales(_ficha())