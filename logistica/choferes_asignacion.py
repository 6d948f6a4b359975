"""Assigning trucks to drivers and keeping the drivers' copies of their trucks current."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import TypeVar

from .camiones import Camion
from .camiones_manager import _confirmar, _pedir_id
from .camiones_reports import CamionesListados
from .camiones_store import CamionesArchivo
from .choferes import Chofer
from .choferes_reports import ChoferesListados
from .choferes_store import ChoferesArchivo
from .consola import Consola

T = TypeVar("T")

ASIGNACION_CORRECTA = "ASIGNACIÓN CORRECTA ✔ \n"
DESASIGNACION_CORRECTA = "DESASIGNACIÓN CORRECTA ✔ \n"


def _buscar(registros: Iterable[T], condicion: Callable[[T], bool]) -> tuple[int, T] | None:
    return next(
        ((pos, registro) for pos, registro in enumerate(registros) if condicion(registro)),
        None,
    )


def _chofer_sin_camion(choferes: ChoferesArchivo, id_chofer: int) -> tuple[int, Chofer] | None:
    return _buscar(
        choferes,
        lambda c: c.id_chofer == id_chofer and c.estado and not c.asignado,
    )


def _chofer_con_camion(choferes: ChoferesArchivo, id_chofer: int) -> tuple[int, Chofer] | None:
    return _buscar(
        choferes,
        lambda c: c.id_chofer == id_chofer and c.estado and c.asignado,
    )


def _camion_activo(camiones: CamionesArchivo, id_camion: int) -> tuple[int, Camion] | None:
    return _buscar(camiones, lambda c: c.id_camion == id_camion and c.estado)


def sincronizar_camiones_asignados(choferes: ChoferesArchivo, camiones: CamionesArchivo) -> int:
    """Refresh each assigned driver's copy of its truck from the truck file; return how many."""
    actualizados = 0
    for pos, chofer in enumerate(choferes):
        if not (chofer.estado and chofer.asignado):
            continue
        camion = camiones.buscar_por_id(chofer.camion_asignado.id_camion)
        if camion is None:
            continue
        chofer.camion_asignado = camion
        choferes.modificar(pos, chofer)
        actualizados += 1
    return actualizados


def asignar(
    choferes: ChoferesArchivo,
    camiones: CamionesArchivo,
    id_chofer: int,
    id_camion: int,
) -> Chofer:
    """Give an active truck to an active driver without one; raise LookupError otherwise."""
    encontrado = _chofer_sin_camion(choferes, id_chofer)
    if encontrado is None:
        raise LookupError(f"no hay chofer activo sin camión con ID {id_chofer}")
    pos_chofer, chofer = encontrado
    encontrado_camion = _camion_activo(camiones, id_camion)
    if encontrado_camion is None:
        raise LookupError(f"no hay camión activo con ID {id_camion}")
    pos_camion, camion = encontrado_camion

    camion.chofer_asignado = True
    chofer.asignado = True
    chofer.camion_asignado = copy.deepcopy(camion)
    camiones.modificar(pos_camion, camion)
    choferes.modificar(pos_chofer, chofer)
    return chofer


def desasignar(choferes: ChoferesArchivo, camiones: CamionesArchivo, id_chofer: int) -> Chofer:
    """Take the truck away from an active driver that has one; raise LookupError otherwise."""
    encontrado = _chofer_con_camion(choferes, id_chofer)
    if encontrado is None:
        raise LookupError(f"no hay chofer activo con camión con ID {id_chofer}")
    pos_chofer, chofer = encontrado

    encontrado_camion = _camion_activo(camiones, chofer.camion_asignado.id_camion)
    if encontrado_camion is not None:
        pos_camion, camion = encontrado_camion
        camion.chofer_asignado = False
        camiones.modificar(pos_camion, camion)

    chofer.asignado = False
    chofer.camion_asignado = Camion()
    choferes.modificar(pos_chofer, chofer)
    return chofer


class AsignacionCamiones:
    """Interactive screens to assign and unassign trucks."""

    def __init__(
        self,
        choferes: ChoferesArchivo,
        camiones: CamionesArchivo,
        consola: Consola,
        reloj: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.choferes = choferes
        self.camiones = camiones
        self.consola = consola
        self.reloj = reloj

    def _no_encontrado(self, mensaje: str) -> bool:
        self.consola.limpiar()
        self.consola.escribir(mensaje + "\n\n")
        self.consola.pausa()
        return False

    def asignar_camion(self) -> bool:
        """Pick a driver without a truck and a truck, and assign them once confirmed."""
        consola = self.consola
        ChoferesListados(self.choferes, consola, self.reloj).listar_sin_camion()
        id_chofer = _pedir_id(
            consola, "\n\nPor favor, seleccionar ID de chofer para asignarle camión: "
        )
        encontrado = _chofer_sin_camion(self.choferes, id_chofer)
        if encontrado is None:
            return self._no_encontrado(
                "El ID no existe o no pertenece a un chofer al que se le pueda asignar un camión"
            )
        _, chofer = encontrado

        consola.limpiar()
        CamionesListados(self.camiones, consola, self.reloj).listar_sin_asignar()
        id_camion = _pedir_id(
            consola, "\n\nPor favor, seleccionar el ID de camión para asignarle al chofer: "
        )
        encontrado_camion = _camion_activo(self.camiones, id_camion)
        if encontrado_camion is None:
            return self._no_encontrado(
                "El ID no existe o no pertenece a un chofer al que se le pueda asignar un camión"
            )
        _, camion = encontrado_camion

        consola.limpiar()
        consola.escribir(
            f"Al chofer: '{chofer.nombre} {chofer.apellido}' Se le asignará el camion: "
            f"'{camion.marca} {camion.modelo}'\n\n1. Confirmar\n2.Volver\n"
        )
        if not _confirmar(consola, ""):
            return False
        asignar(self.choferes, self.camiones, id_chofer, id_camion)
        consola.limpiar()
        consola.escribir(ASIGNACION_CORRECTA)
        consola.pausa()
        return True

    def desasignar_camion(self) -> bool:
        """Pick a driver with a truck and take the truck away once confirmed."""
        consola = self.consola
        ChoferesListados(self.choferes, consola, self.reloj).listar_con_camion()
        id_chofer = _pedir_id(
            consola, "\n\nPor favor, seleccionar ID de chofer para quitar camión asignado: "
        )
        encontrado = _chofer_con_camion(self.choferes, id_chofer)
        if encontrado is None:
            return self._no_encontrado(
                "El ID no existe o no pertenece a un chofer al que se le pueda quitar "
                "la asignación de un camión"
            )
        _, chofer = encontrado

        consola.limpiar()
        consola.escribir(
            f"Al chofer: '{chofer.nombre} {chofer.apellido}' Se le quitará la asignación "
            f"del camion: '{chofer.camion_asignado.marca} {chofer.camion_asignado.modelo}'"
            "\n\n1. Confirmar\n2.Volver\n"
        )
        if not _confirmar(consola, ""):
            return False
        desasignar(self.choferes, self.camiones, id_chofer)
        consola.limpiar()
        consola.escribir(DESASIGNACION_CORRECTA)
        consola.pausa()
        return True