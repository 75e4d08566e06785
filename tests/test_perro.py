from refugio_perros.fecha import Fecha
from refugio_perros.perro import Perro


def _perro():
    return Perro(7, "Firulais", 3, 80, "Marron y juguetón", Fecha(12, 5, 2022))


def test_campos():
    perro = _perro()
    assert perro.id == 7
    assert perro.nombre == "Firulais"
    assert perro.edad == 3
    assert perro.vitalidad == 80
    assert perro.ingreso == Fecha(12, 5, 2022)


def test_copia_igual_e_independiente():
    perro = _perro()
    copia = perro.copia()
    assert copia == perro
    copia.ingreso.aumentar(10)
    copia.edad = 4
    assert perro.ingreso == Fecha(12, 5, 2022)
    assert perro.edad == 3
    assert copia.ingreso is not perro.ingreso


def test_actualizar_edad_y_vitalidad():
    perro = _perro()
    perro.edad = 5
    perro.vitalidad = 20
    assert (perro.edad, perro.vitalidad) == (5, 20)


def test_describir():
    texto = _perro().describir()
    assert texto == (
        "Perro 7\n"
        "Nombre: Firulais\n"
        "Edad: 3\n"
        "Descripcion: Marron y juguetón\n"
        "Fecha de ingreso: 12/5/2022\n"
        "Vitalidad: 80\n"
    )


def test_describir_lineas():
    lineas = _perro().describir().splitlines()
    assert len(lineas) == 6
    assert lineas[0].startswith("Perro ")
    assert lineas[-1].startswith("Vitalidad: ")