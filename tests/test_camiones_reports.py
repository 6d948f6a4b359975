from datetime import date, datetime
from io import StringIO

import pytest

from logistica.camiones import Camion
from logistica.camiones_reports import (
    CamionesListados,
    actualizar_verificacion,
    por_antiguedad,
    verificacion_vencida,
)
from logistica.camiones_store import CamionesArchivo
from logistica.consola import Consola
from logistica.fecha import Fecha

HOY = datetime(2024, 6, 15, 12, 0)


def _camion(id_camion, patente, anio=2010, verificacion=None, **extra):
    return Camion(
        id_camion=id_camion,
        patente=patente,
        marca=f"Marca{id_camion}",
        modelo=f"Modelo{id_camion}",
        anio=anio,
        ultima_verificacion=verificacion or Fecha(1, 1, 2024),
        **extra,
    )


@pytest.fixture
def archivo(tmp_path):
    return CamionesArchivo(tmp_path / "camiones.dat")


def _listados(archivo):
    salida = StringIO()
    consola = Consola(StringIO(""), salida)
    return CamionesListados(archivo, consola, reloj=lambda: HOY), salida


def test_vencida_exactly_one_year_later():
    assert verificacion_vencida(Fecha(10, 5, 2020), datetime(2021, 5, 10)) is True


def test_not_vencida_just_before_one_year():
    assert verificacion_vencida(Fecha(10, 5, 2020), datetime(2021, 5, 9, 23, 59)) is False


def test_leap_day_expires_on_first_of_march():
    fecha = Fecha(29, 2, 2020)
    assert verificacion_vencida(fecha, date(2021, 2, 28)) is False
    assert verificacion_vencida(fecha, date(2021, 3, 1)) is True


def test_empty_date_counts_as_expired():
    assert verificacion_vencida(Fecha(), HOY) is True


def test_actualizar_verificacion_updates_active_trucks(archivo):
    archivo.guardar(_camion(1, "AA111AA", verificacion=Fecha(1, 1, 2020)))
    archivo.guardar(_camion(2, "BB222BB", verificacion=Fecha(1, 1, 2024), apto_circular=False))
    archivo.guardar(_camion(3, "CC333CC", verificacion=Fecha(1, 1, 2020), estado=False))

    cambios = actualizar_verificacion(archivo, HOY)

    assert cambios == 2
    assert archivo.leer(0).apto_circular is False
    assert archivo.leer(1).apto_circular is True
    assert archivo.leer(2).apto_circular is True


def test_actualizar_verificacion_is_idempotent(archivo):
    archivo.guardar(_camion(1, "AA111AA", verificacion=Fecha(1, 1, 2020)))
    actualizar_verificacion(archivo, HOY)
    assert actualizar_verificacion(archivo, HOY) == 0


def test_por_antiguedad_newest_first_and_stable():
    camiones = [
        _camion(1, "AA111AA", anio=2000),
        _camion(2, "BB222BB", anio=2015),
        _camion(3, "CC333CC", anio=2010),
        _camion(4, "DD444DD", anio=2015),
        _camion(5, "EE555EE", anio=2020, estado=False),
    ]
    assert [c.id_camion for c in por_antiguedad(camiones)] == [2, 4, 3, 1]


def test_listar_todos_skips_removed_trucks(archivo):
    archivo.guardar(_camion(1, "AA111AA"))
    archivo.guardar(_camion(2, "BB222BB", estado=False))
    listados, salida = _listados(archivo)
    listados.listar_todos()
    texto = salida.getvalue()
    assert "AA111AA" in texto
    assert "BB222BB" not in texto


def test_listar_en_viaje_only_trucks_on_trip(archivo):
    archivo.guardar(_camion(1, "AA111AA", en_viaje=True))
    archivo.guardar(_camion(2, "BB222BB"))
    listados, salida = _listados(archivo)
    listados.listar_en_viaje()
    texto = salida.getvalue()
    assert "Marca1" in texto
    assert "Marca2" not in texto


def test_listar_sin_asignar_excludes_assigned(archivo):
    archivo.guardar(_camion(1, "AA111AA", chofer_asignado=True))
    archivo.guardar(_camion(2, "BB222BB"))
    listados, salida = _listados(archivo)
    listados.listar_sin_asignar()
    texto = salida.getvalue()
    assert "BB222BB" in texto
    assert "AA111AA" not in texto


def test_mostrar_km_shows_each_month(archivo):
    camion = _camion(1, "AA111AA")
    camion.sumar_km(1234, 3)
    archivo.guardar(camion)
    listados, salida = _listados(archivo)
    listados.mostrar_km_por_camion()
    assert "1234" in salida.getvalue()


def test_mostrar_verificaciones_marks_expired(archivo):
    archivo.guardar(_camion(1, "AA111AA", verificacion=Fecha(1, 1, 2020)))
    listados, salida = _listados(archivo)
    listados.mostrar_verificaciones()
    assert "❗VENCIDA" in salida.getvalue()


def test_mostrar_por_antiguedad_orders_rows(archivo):
    archivo.guardar(_camion(1, "AA111AA", anio=2001))
    archivo.guardar(_camion(2, "BB222BB", anio=2019))
    listados, salida = _listados(archivo)
    listados.mostrar_por_antiguedad()
    texto = salida.getvalue()
    assert texto.index("BB222BB") < texto.index("AA111AA")