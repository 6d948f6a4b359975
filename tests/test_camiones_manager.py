import io
from datetime import datetime

import pytest

from logistica.camiones import Camion
from logistica.camiones_manager import CamionesManager
from logistica.camiones_store import CamionesArchivo
from logistica.consola import Consola
from logistica.fecha import Fecha

HOY = datetime(2025, 6, 1, 12, 0)


def consola_con(*lineas):
    return Consola(io.StringIO("".join(linea + "\n" for linea in lineas)), io.StringIO())


@pytest.fixture
def archivo(tmp_path):
    return CamionesArchivo(tmp_path / "camiones.dat")


def manager(archivo, consola):
    return CamionesManager(archivo, consola, reloj=lambda: HOY)


ALTA_OK = ("Volvo", "FH", "ab123cd", "2020", "10", "3", "2025", "20000", "80", "1", "")


def test_alta_camion_saves_record(archivo):
    consola = consola_con(*ALTA_OK)
    camion = manager(archivo, consola).alta_camion()
    assert archivo.cantidad() == 1
    guardado = archivo.leer(0)
    assert guardado == camion
    assert guardado.marca == "Volvo"
    assert guardado.modelo == "FH"
    assert guardado.patente == "AB123CD"
    assert guardado.anio == 2020
    assert guardado.ultima_verificacion == Fecha(10, 3, 2025)
    assert guardado.peso_carga == 20000
    assert guardado.volumen_carga == 80
    assert guardado.apto_circular is True
    assert guardado.id_camion == 1


def test_alta_camion_ids_follow_last(archivo):
    manager(archivo, consola_con(*ALTA_OK)).alta_camion()
    manager(archivo, consola_con(*ALTA_OK)).alta_camion()
    assert [c.id_camion for c in archivo] == [1, 2]


def test_alta_camion_retries_invalid_values(archivo):
    consola = consola_con(
        "Scania", "R450", "abc", "xy987zz", "1950", "abc", "2019",
        "32", "15", "13", "7", "2024", "100", "30000", "200", "90", "1", "",
    )
    camion = manager(archivo, consola).alta_camion()
    salida = consola.salida.getvalue()
    assert "Patente inválida" in salida
    assert "Año inválido. Debe estar entre 1960 y 2025." in salida
    assert "Dia inválido" in salida
    assert "Mes inválido" in salida
    assert "Peso fuera de rango" in salida
    assert "Volumen fuera de rango" in salida
    assert camion.patente == "XY987ZZ"
    assert camion.anio == 2019
    assert camion.ultima_verificacion == Fecha(15, 7, 2024)
    assert camion.peso_carga == 30000
    assert camion.volumen_carga == 90


def test_alta_camion_expired_inspection_not_fit(archivo):
    consola = consola_con("Iveco", "Stralis", "aaa111", "2015", "1", "1", "2020",
                          "10000", "40", "1", "")
    camion = manager(archivo, consola).alta_camion()
    assert camion.apto_circular is False
    assert archivo.leer(0).apto_circular is False
    assert "Verificacion vencida" in consola.salida.getvalue()


def test_alta_camion_discarded(archivo):
    consola = consola_con(*ALTA_OK[:-2], "2")
    assert manager(archivo, consola).alta_camion() is None
    assert archivo.cantidad() == 0


def guardar_dos(archivo):
    archivo.guardar(Camion(id_camion=1, marca="Uno", ultima_verificacion=Fecha(1, 1, 2025)))
    archivo.guardar(Camion(id_camion=2, marca="Dos", ultima_verificacion=Fecha(1, 1, 2025)))


def test_baja_camion_marks_inactive(archivo):
    guardar_dos(archivo)
    consola = consola_con("", "2", "", "1", "")
    assert manager(archivo, consola).baja_camion() is True
    assert archivo.leer(0).estado is True
    assert archivo.leer(1).estado is False


def test_baja_camion_rejects_non_positive_id(archivo):
    guardar_dos(archivo)
    consola = consola_con("", "0", "abc", "1", "", "1", "")
    assert manager(archivo, consola).baja_camion() is True
    assert archivo.leer(0).estado is False
    assert "Ingreso incorrecto" in consola.salida.getvalue()


def test_baja_camion_unknown_id(archivo):
    guardar_dos(archivo)
    consola = consola_con("", "9", "", "")
    assert manager(archivo, consola).baja_camion() is False
    assert "no existe en los registros" in consola.salida.getvalue()
    assert all(c.estado for c in archivo)


def test_baja_camion_already_removed_not_found(archivo):
    archivo.guardar(Camion(id_camion=1, estado=False, ultima_verificacion=Fecha(1, 1, 2025)))
    consola = consola_con("", "1", "", "")
    assert manager(archivo, consola).baja_camion() is False


def test_baja_camion_answer_no(archivo):
    guardar_dos(archivo)
    consola = consola_con("", "1", "", "2")
    assert manager(archivo, consola).baja_camion() is False
    assert all(c.estado for c in archivo)


def test_modificar_verificacion_renews_to_today(archivo):
    archivo.guardar(Camion(id_camion=1, marca="Vieja", ultima_verificacion=Fecha(1, 1, 2020)))
    archivo.guardar(Camion(id_camion=2, marca="Nueva", ultima_verificacion=Fecha(1, 1, 2025)))
    consola = consola_con("1", "", "1", "")
    assert manager(archivo, consola).modificar_verificacion() is True
    assert archivo.leer(0).ultima_verificacion == Fecha(HOY.day, HOY.month, HOY.year)
    salida = consola.salida.getvalue()
    assert "Vieja" in salida
    assert "Nueva" not in salida


def test_modificar_verificacion_valid_truck_refused(archivo):
    archivo.guardar(Camion(id_camion=1, ultima_verificacion=Fecha(1, 1, 2025)))
    consola = consola_con("1", "", "")
    assert manager(archivo, consola).modificar_verificacion() is False
    assert archivo.leer(0).ultima_verificacion == Fecha(1, 1, 2025)
    assert "El ID no existe" in consola.salida.getvalue()


def test_modificar_verificacion_cancelled(archivo):
    archivo.guardar(Camion(id_camion=1, ultima_verificacion=Fecha(1, 1, 2020)))
    consola = consola_con("1", "", "2")
    assert manager(archivo, consola).modificar_verificacion() is False
    assert archivo.leer(0).ultima_verificacion == Fecha(1, 1, 2020)