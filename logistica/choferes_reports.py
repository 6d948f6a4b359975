"""Driver listings and the yearly licence check."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime

from .camiones_reports import verificacion_vencida
from .choferes import Chofer
from .choferes_store import ChoferesArchivo
from .consola import Consola
from .fecha import Fecha


def licencia_vencida(fecha: Fecha, hoy: date) -> bool:
    """True once a full year has passed since ``fecha``."""
    return verificacion_vencida(fecha, hoy)


def actualizar_licencia(archivo: ChoferesArchivo, hoy: date) -> int:
    """Bring the fit-to-drive flag of every active driver up to date; return how many changed."""
    cambios = 0
    for pos, chofer in enumerate(archivo):
        if not chofer.estado:
            continue
        apto = not licencia_vencida(chofer.vencimiento_licencia, hoy)
        if chofer.apto_circular != apto:
            chofer.apto_circular = apto
            archivo.modificar(pos, chofer)
            cambios += 1
    return cambios


class ChoferesListados:
    """The driver listings shown on the console."""

    def __init__(
        self,
        archivo: ChoferesArchivo,
        consola: Consola,
        reloj: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.archivo = archivo
        self.consola = consola
        self.reloj = reloj

    def _listar(self, incluir: Callable[[Chofer], bool]) -> None:
        actualizar_licencia(self.archivo, self.reloj())
        self.consola.limpiar()
        self.consola.escribir(
            f"{'ID':<6}{'DNI':<10}{'NOMBRE':<20}{'APELLIDO':<20}{'EXP.':<7}"
            f"{'VENC. LIC.':<15}{'APTO':<8}{'EN VIAJE':<12}{'CAMIÓN':<30}"
        )
        self.consola.escribir("\n" + "-" * 125 + "\n")
        for chofer in self.archivo:
            if chofer.estado and incluir(chofer):
                self.consola.escribir(chofer.fila() + "\n")
        self.consola.escribir("\n\n")
        self.consola.pausa()

    def listar_todos(self) -> None:
        """List every active driver."""
        self._listar(lambda chofer: True)

    def listar_sin_camion(self) -> None:
        """List the active drivers without a truck."""
        self._listar(lambda chofer: not chofer.asignado)

    def listar_con_camion(self) -> None:
        """List the active drivers that have a truck."""
        self._listar(lambda chofer: chofer.asignado)

    def mostrar_cantidad_registros(self) -> int:
        """Show and return the number of stored driver records."""
        cantidad = self.archivo.cantidad()
        self.consola.escribir(f"La cantidad de registros son: {cantidad}\n")
        return cantidad