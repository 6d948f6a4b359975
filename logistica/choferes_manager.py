"""Interactive screens to register and retire drivers."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from .camiones_manager import (
    GUARDADO_FINAL,
    _confirmar,
    _pedir,
    _pedir_fecha,
    _pedir_id,
)
from .choferes import Chofer
from .choferes_reports import ChoferesListados, licencia_vencida
from .choferes_store import ChoferesArchivo
from .consola import Consola


class ChoferesManager:
    """Registration and removal of drivers."""

    def __init__(
        self,
        archivo: ChoferesArchivo,
        consola: Consola,
        reloj: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.archivo = archivo
        self.consola = consola
        self.reloj = reloj

    def cargar_chofer(self) -> Chofer | None:
        """Ask for a new driver and save it once confirmed; return it, or None if discarded."""
        consola = self.consola
        consola.limpiar()
        chofer = Chofer()

        consola.escribir("\nALTA CHOFER")
        chofer.id_chofer = self.archivo.ultimo_id() + 1

        def dni(valor: int) -> None:
            chofer.dni = valor

        _pedir(consola, consola.leer_entero, "\n\nIngresar DNI: ", dni, "DNI invalido.\n")

        def nombre(valor: str) -> None:
            chofer.nombre = valor

        _pedir(consola, consola.leer_linea, "\n\nIngresar nombre/s: ", nombre,
               "\nNombre inválido, o demasiado largo. Intente de vuelta\n")

        def apellido(valor: str) -> None:
            chofer.apellido = valor

        _pedir(consola, consola.leer_linea, "\n\nIngresar apellido/s: ", apellido,
               "\nApellido inválido, o demasiado largo. Intente de vuelta\n")

        def experiencia(valor: int) -> None:
            chofer.experiencia = valor

        _pedir(consola, consola.leer_entero, "\n\nIngresar años de experiencia: ",
               experiencia, "Invalido.\n")

        consola.escribir(
            "\n\nIngresar la fecha del vencimiento de la licencia de conducir: "
        )
        fecha = _pedir_fecha(consola)
        chofer.vencimiento_licencia = fecha

        consola.limpiar()
        consola.escribir("RESUMEN\n")
        consola.escribir(f"\nID: {chofer.id_chofer}")
        consola.escribir(f"\nDNI: {chofer.dni}")
        consola.escribir(f"\nNombre/s: {chofer.nombre}")
        consola.escribir(f"\nApellido/s: {chofer.apellido}")
        consola.escribir(f"\nAños de experiencia: {chofer.experiencia}")
        consola.escribir(
            f"\nFecha de vencimiento de la licencia de conducir: {fecha.padded()}"
        )
        if licencia_vencida(fecha, self.reloj()):
            consola.escribir(
                "\nLicencia de conducir vencida, el chofer se dará de alta como "
                "'no apto para circular' hasta renovar la licencia de conducir."
            )
            chofer.apto_circular = False
        else:
            consola.escribir("\nApto Circular ✔")

        consola.escribir("\n\nConfirmar alta de chofer?")
        if not _confirmar(consola, "\n1 - Confirmar\n2 - Volver a ingresar\n\n"):
            return None
        self.archivo.guardar(chofer)
        consola.limpiar()
        consola.escribir(GUARDADO_FINAL)
        return chofer

    def baja_chofer(self) -> bool:
        """Mark an active driver as removed; return whether one was removed."""
        consola = self.consola
        consola.limpiar()
        ChoferesListados(self.archivo, consola, self.reloj).listar_todos()

        elegido = _pedir_id(
            consola, "\n\nPor favor, seleccionar el ID del chofer a dar de baja: "
        )
        consola.limpiar()

        encontrado = next(
            (
                (pos, chofer)
                for pos, chofer in enumerate(self.archivo)
                if chofer.id_chofer == elegido and chofer.estado
            ),
            None,
        )
        if encontrado is None:
            consola.escribir("\nEl ID seleccionado no existe en los registros\n\n")
            consola.pausa()
            return False

        posicion, chofer = encontrado
        consola.escribir(chofer.fila())
        consola.escribir("\n\nDesea dar de baja este chofer?\n1. SI\n2. NO\n")
        consola.escribir("\n")
        if not _confirmar(consola, ""):
            return False
        chofer.estado = False
        self.archivo.modificar(posicion, chofer)
        consola.limpiar()
        consola.escribir(GUARDADO_FINAL)
        consola.pausa()
        return True