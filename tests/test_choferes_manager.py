import io
from datetime import datetime

import pytest

from logistica.choferes import Chofer
from logistica.choferes_manager import ChoferesManager
from logistica.choferes_store import ChoferesArchivo
from logistica.consola import Consola
from logistica.fecha import Fecha

HOY = datetime(2025, 6, 1, 12, 0)


def consola_con(*lineas):
    return Consola(io.StringIO("".join(linea + "\n" for linea in lineas)), io.StringIO())


@pytest.fixture
def archivo(tmp_path):
    return ChoferesArchivo(tmp_path / "choferes.dat")


def manager(archivo, consola):
    return ChoferesManager(archivo, consola, reloj=lambda: HOY)


ALTA_OK = ("12345678", "Juan", "Perez", "5", "1", "1", "2030", "1")


def test_cargar_chofer_saves_record(archivo):
    consola = consola_con(*ALTA_OK)
    chofer = manager(archivo, consola).cargar_chofer()
    assert archivo.cantidad() == 1
    guardado = archivo.leer(0)
    assert guardado == chofer
    assert guardado.id_chofer == 1
    assert guardado.dni == 12345678
    assert guardado.nombre == "Juan"
    assert guardado.apellido == "Perez"
    assert guardado.experiencia == 5
    assert guardado.vencimiento_licencia == Fecha(1, 1, 2030)
    assert guardado.apto_circular is True
    assert guardado.asignado is False
    assert "GUARDADO CORRECTO" in consola.salida.getvalue()


def test_cargar_chofer_ids_follow_last(archivo):
    manager(archivo, consola_con(*ALTA_OK)).cargar_chofer()
    manager(archivo, consola_con(*ALTA_OK)).cargar_chofer()
    assert [c.id_chofer for c in archivo] == [1, 2]


def test_cargar_chofer_retries_invalid_values(archivo):
    consola = consola_con(
        "123", "dni", "23456789", "x" * 30, "Ana", "Gomez", "81", "-1", "10",
        "32", "20", "0", "5", "1800", "2031", "1",
    )
    chofer = manager(archivo, consola).cargar_chofer()
    salida = consola.salida.getvalue()
    assert "DNI invalido." in salida
    assert "Nombre inválido" in salida
    assert "Invalido." in salida
    assert "Dia inválido" in salida
    assert "Mes inválido" in salida
    assert "Año inválido" in salida
    assert chofer.dni == 23456789
    assert chofer.nombre == "Ana"
    assert chofer.experiencia == 10
    assert chofer.vencimiento_licencia == Fecha(20, 5, 2031)


def test_cargar_chofer_expired_licence_not_fit(archivo):
    consola = consola_con("12345678", "Luis", "Diaz", "3", "1", "1", "2020", "1")
    chofer = manager(archivo, consola).cargar_chofer()
    assert chofer.apto_circular is False
    assert archivo.leer(0).apto_circular is False
    assert "Licencia de conducir vencida" in consola.salida.getvalue()


def test_cargar_chofer_discarded(archivo):
    consola = consola_con(*ALTA_OK[:-1], "2")
    assert manager(archivo, consola).cargar_chofer() is None
    assert archivo.cantidad() == 0


def guardar_dos(archivo):
    archivo.guardar(Chofer(id_chofer=1, nombre="Uno", vencimiento_licencia=Fecha(1, 1, 2030)))
    archivo.guardar(Chofer(id_chofer=2, nombre="Dos", vencimiento_licencia=Fecha(1, 1, 2030)))


def test_baja_chofer_marks_inactive(archivo):
    guardar_dos(archivo)
    consola = consola_con("", "1", "", "1", "")
    assert manager(archivo, consola).baja_chofer() is True
    assert archivo.leer(0).estado is False
    assert archivo.leer(1).estado is True


def test_baja_chofer_unknown_id(archivo):
    guardar_dos(archivo)
    consola = consola_con("", "7", "", "")
    assert manager(archivo, consola).baja_chofer() is False
    assert "no existe en los registros" in consola.salida.getvalue()
    assert all(c.estado for c in archivo)


def test_baja_chofer_answer_no(archivo):
    guardar_dos(archivo)
    consola = consola_con("", "2", "", "2")
    assert manager(archivo, consola).baja_chofer() is False
    assert all(c.estado for c in archivo)


def test_baja_chofer_removed_driver_not_found(archivo):
    archivo.guardar(Chofer(id_chofer=1, estado=False, vencimiento_licencia=Fecha(1, 1, 2030)))
    consola = consola_con("", "1", "", "")
    assert manager(archivo, consola).baja_chofer() is False
    assert archivo.leer(0).estado is False