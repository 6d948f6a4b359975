import io
from datetime import datetime

import pytest

from logistica.camiones import Camion
from logistica.camiones_store import CamionesArchivo
from logistica.choferes import Chofer
from logistica.choferes_asignacion import (
    AsignacionCamiones,
    asignar,
    desasignar,
    sincronizar_camiones_asignados,
)
from logistica.choferes_store import ChoferesArchivo
from logistica.consola import Consola
from logistica.fecha import Fecha

AHORA = datetime(2025, 6, 1, 10, 0)


def _camion(id_camion=1, marca="Scania"):
    return Camion(
        id_camion=id_camion,
        marca=marca,
        modelo="R450",
        anio=2020,
        peso_carga=10000,
        volumen_carga=50,
        ultima_verificacion=Fecha(1, 1, 2025),
    )


def _chofer(id_chofer=1):
    return Chofer(
        id_chofer=id_chofer,
        nombre="Ana",
        apellido="Diaz",
        vencimiento_licencia=Fecha(1, 1, 2025),
    )


@pytest.fixture
def archivos(tmp_path):
    choferes = ChoferesArchivo(tmp_path / "choferes.dat")
    camiones = CamionesArchivo(tmp_path / "camiones.dat")
    choferes.guardar(_chofer(1))
    choferes.guardar(_chofer(2))
    camiones.guardar(_camion(1))
    camiones.guardar(_camion(2, marca="Volvo"))
    return choferes, camiones


def _consola(texto):
    return Consola(io.StringIO(texto), io.StringIO())


def test_asignar_updates_both_files(archivos):
    choferes, camiones = archivos
    chofer = asignar(choferes, camiones, 1, 2)
    assert chofer.asignado is True
    guardado = choferes.leer(0)
    assert guardado.asignado is True
    assert guardado.camion_asignado.id_camion == 2
    assert guardado.camion_asignado.marca == "Volvo"
    assert camiones.leer(1).chofer_asignado is True
    assert camiones.leer(0).chofer_asignado is False


def test_asignar_unknown_driver_raises(archivos):
    choferes, camiones = archivos
    with pytest.raises(LookupError):
        asignar(choferes, camiones, 9, 1)


def test_asignar_unknown_truck_raises(archivos):
    choferes, camiones = archivos
    with pytest.raises(LookupError):
        asignar(choferes, camiones, 1, 9)
    assert choferes.leer(0).asignado is False


def test_asignar_driver_already_assigned_raises(archivos):
    choferes, camiones = archivos
    asignar(choferes, camiones, 1, 1)
    with pytest.raises(LookupError):
        asignar(choferes, camiones, 1, 2)


def test_asignar_retired_truck_raises(archivos):
    choferes, camiones = archivos
    camion = camiones.leer(0)
    camion.estado = False
    camiones.modificar(0, camion)
    with pytest.raises(LookupError):
        asignar(choferes, camiones, 1, 1)


def test_desasignar_clears_both(archivos):
    choferes, camiones = archivos
    asignar(choferes, camiones, 1, 1)
    chofer = desasignar(choferes, camiones, 1)
    assert chofer.asignado is False
    guardado = choferes.leer(0)
    assert guardado.asignado is False
    assert guardado.camion_asignado == Camion()
    assert camiones.leer(0).chofer_asignado is False


def test_desasignar_driver_without_truck_raises(archivos):
    choferes, camiones = archivos
    with pytest.raises(LookupError):
        desasignar(choferes, camiones, 1)


def test_sincronizar_refreshes_copy(archivos):
    choferes, camiones = archivos
    asignar(choferes, camiones, 1, 1)
    camion = camiones.leer(0)
    camion.marca = "Iveco"
    camiones.modificar(0, camion)
    assert sincronizar_camiones_asignados(choferes, camiones) == 1
    assert choferes.leer(0).camion_asignado.marca == "Iveco"
    assert choferes.leer(1).camion_asignado == Camion()


def test_sincronizar_without_assignments(archivos):
    choferes, camiones = archivos
    assert sincronizar_camiones_asignados(choferes, camiones) == 0


def test_asignar_camion_interactive(archivos):
    choferes, camiones = archivos
    consola = _consola("\n1\n\n\n1\n\n1\n")
    pantalla = AsignacionCamiones(choferes, camiones, consola, lambda: AHORA)
    assert pantalla.asignar_camion() is True
    assert choferes.leer(0).camion_asignado.id_camion == 1
    assert camiones.leer(0).chofer_asignado is True
    salida = consola.salida.getvalue()
    assert "Se le asignará el camion: 'Scania R450'" in salida
    assert "ASIGNACIÓN CORRECTA ✔" in salida


def test_asignar_camion_cancelled(archivos):
    choferes, camiones = archivos
    consola = _consola("\n1\n\n\n1\n\n2\n")
    pantalla = AsignacionCamiones(choferes, camiones, consola, lambda: AHORA)
    assert pantalla.asignar_camion() is False
    assert choferes.leer(0).asignado is False
    assert camiones.leer(0).chofer_asignado is False


def test_asignar_camion_unknown_driver(archivos):
    choferes, camiones = archivos
    consola = _consola("\n9\n\n\n")
    pantalla = AsignacionCamiones(choferes, camiones, consola, lambda: AHORA)
    assert pantalla.asignar_camion() is False
    assert "El ID no existe" in consola.salida.getvalue()


def test_desasignar_camion_interactive(archivos):
    choferes, camiones = archivos
    asignar(choferes, camiones, 2, 2)
    consola = _consola("\n2\n\n1\n")
    pantalla = AsignacionCamiones(choferes, camiones, consola, lambda: AHORA)
    assert pantalla.desasignar_camion() is True
    assert choferes.leer(1).asignado is False
    assert camiones.leer(1).chofer_asignado is False
    assert "DESASIGNACIÓN CORRECTA ✔" in consola.salida.getvalue()