"""The menus of the logistics management system and its command entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from os import PathLike
from pathlib import Path

from .camiones_manager import CamionesManager
from .camiones_reports import CamionesListados
from .camiones_store import ARCHIVO_CAMIONES, CamionesArchivo
from .choferes_asignacion import AsignacionCamiones
from .choferes_manager import ChoferesManager
from .choferes_reports import ChoferesListados, actualizar_licencia
from .choferes_store import ARCHIVO_CHOFERES, ChoferesArchivo
from .clientes_manager import ClientesManager
from .clientes_store import ARCHIVO_CLIENTES, ClientesArchivo
from .consola import Consola
from .viajes_manager import ViajesManager
from .viajes_store import ARCHIVO_VIAJES, ViajesArchivo

SEPARADOR = "=" * 39
INVALIDA = "Opción inválida. Por favor, intente de nuevo.\n"
PROMPT = "Ingrese una opcion: "
PROMPT_ACENTO = "Ingrese una opción: "


def _pantalla(titulo: str, opciones: Sequence[str], volver: str) -> str:
    cuerpo = "".join(f"{linea}\n" for linea in opciones)
    return f"{SEPARADOR}\n{titulo}\n{SEPARADOR}\n{cuerpo}\n{volver}\n{SEPARADOR}\n"


def _nada() -> None:
    """A menu entry that does nothing yet."""


class Menus:
    """Every menu of the system, wired to the data files of one directory."""

    def __init__(self, consola: Consola, directorio: str | PathLike[str] = ".") -> None:
        self.consola = consola
        base = Path(directorio)
        self.camiones = CamionesArchivo(base / ARCHIVO_CAMIONES)
        self.choferes = ChoferesArchivo(base / ARCHIVO_CHOFERES)
        self.clientes = ClientesArchivo(base / ARCHIVO_CLIENTES)
        self.viajes = ViajesArchivo(base / ARCHIVO_VIAJES)
        self.ciudades_path = base / "Ciudades" / "datos2.bin"
        self.reloj: Callable[[], datetime] = datetime.now

    def _bucle(
        self,
        pantalla: str,
        acciones: Mapping[str, Callable[[], object]],
        salir: str,
        prompt: str = PROMPT,
    ) -> None:
        consola = self.consola
        while True:
            consola.limpiar()
            consola.escribir(pantalla)
            opcion = consola.leer_linea(prompt).strip()
            if opcion == salir:
                return
            accion = acciones.get(opcion)
            if accion is None:
                consola.escribir(INVALIDA)
            else:
                accion()
            consola.escribir("\n\n")

    def mostrar(self) -> None:
        """The main menu; returns when the user chooses to leave."""
        self._bucle(
            _pantalla(
                "     SISTEMA GESTION DE LOGISTICA",
                ["1. VIAJES", "2. CHOFERES", "3. CAMIONES", "4. CLIENTES"],
                "5. SALIR",
            ),
            {
                "1": self.menu_viajes,
                "2": self.menu_choferes,
                "3": self.menu_camiones,
                "4": self.menu_clientes,
            },
            "5",
        )

    def menu_viajes(self) -> None:
        """Create trips and list active ones and the history."""
        manager = ViajesManager(
            self.viajes, self.choferes, self.camiones, self.ciudades_path,
            self.consola, self.reloj,
        )
        self._bucle(
            _pantalla(
                "        MENÚ VIAJES",
                ["1. CREAR NUEVO VIAJE", "2. VIAJES ACTIVOS", "3. HISTORIAL DE VIAJES"],
                "4. VOLVER AL MENÚ PRINCIPAL",
            ),
            {
                "1": manager.crear_viaje,
                "2": manager.listar_activos,
                "3": manager.listar_historial,
            },
            "4",
        )

    def menu_choferes(self) -> None:
        """The driver menu."""
        asignacion = AsignacionCamiones(self.choferes, self.camiones, self.consola, self.reloj)
        self._bucle(
            _pantalla(
                "        MENÚ CHOFERES",
                [
                    "1. ALTA/BAJA/ACTUALIZACIÓN",
                    "2. LISTADOS/REPORTES",
                    "3. ASIGNAR CAMIÓN",
                    "4. DESASIGNAR CAMIÓN",
                ],
                "5. VOLVER AL MENÚ PRINCIPAL",
            ),
            {
                "1": self.menu_choferes_abm,
                "2": self.menu_choferes_listados,
                "3": asignacion.asignar_camion,
                "4": asignacion.desasignar_camion,
            },
            "5",
            PROMPT_ACENTO,
        )

    def menu_choferes_abm(self) -> None:
        """Register, remove and refresh the licences of drivers."""
        manager = ChoferesManager(self.choferes, self.consola, self.reloj)
        self._bucle(
            _pantalla(
                "        ALTA/BAJA/MODIFICACIÓN",
                [
                    "1. ALTA NUEVO CHOFER",
                    "2. BAJA CHOFER",
                    "3. MODIFICAR CHOFER",
                    "4. ACTUALIZAR LICENCIA",
                ],
                "5. VOLVER AL MENÚ CHOFERES",
            ),
            {
                "1": manager.cargar_chofer,
                "2": manager.baja_chofer,
                "3": lambda: actualizar_licencia(self.choferes, self.reloj()),
            },
            "4",
            PROMPT_ACENTO,
        )

    def menu_choferes_listados(self) -> None:
        """The driver listings."""
        listados = ChoferesListados(self.choferes, self.consola, self.reloj)
        self._bucle(
            _pantalla(
                "        LISTADOS",
                [
                    "1. LISTAR TODOS",
                    "2. LISTAR EN VIAJE",
                    "3. LISTAR CHOFERES SIN CAMION",
                    "4. LISTAR CHOFERES CON CAMIÓN",
                    "5. INFORMAR CANTIDAD DE KM POR CHOFER",
                    "6. INFORMAR ESTADO DE LICENCIAS",
                ],
                "7. VOLVER AL MENÚ CHOFERES",
            ),
            {
                "1": listados.listar_todos,
                "2": _nada,
                "3": listados.listar_sin_camion,
                "4": listados.listar_con_camion,
                "5": _nada,
                "6": _nada,
            },
            "7",
            PROMPT_ACENTO,
        )

    def menu_camiones(self) -> None:
        """The truck menu."""
        self._bucle(
            _pantalla(
                "        MENÚ CAMIONES",
                ["1. ALTA/BAJA/ACTUALIZACIÓN", "2. LISTADOS/REPORTES"],
                "3. VOLVER AL MENÚ PRINCIPAL",
            ),
            {"1": self.menu_camiones_abm, "2": self.menu_camiones_listados},
            "3",
        )

    def menu_camiones_abm(self) -> None:
        """Register and remove trucks and renew their inspection."""
        manager = CamionesManager(self.camiones, self.consola, self.reloj)
        self._bucle(
            _pantalla(
                "        ALTA/BAJA/MODIFICACIÓN",
                ["1. ALTA NUEVO CAMION", "2. BAJA CAMION", "3. ACTUALIZAR VERIFICACION"],
                "4. VOLVER AL MENÚ CAMIONES",
            ),
            {
                "1": manager.alta_camion,
                "2": manager.baja_camion,
                "3": manager.modificar_verificacion,
            },
            "4",
        )

    def menu_camiones_listados(self) -> None:
        """The truck listings and reports."""
        listados = CamionesListados(self.camiones, self.consola, self.reloj)
        self._bucle(
            _pantalla(
                "        LISTADOS DE CAMIONES",
                [
                    "1. LISTAR TODOS",
                    "2. LISTAR EN VIAJE",
                    "3. LISTAR DISPONIBLES PARA ASIGNAR A CHOFER",
                    "4. LISTAR CAMIONES POR ANTIGÜEDAD",
                    "5. INFORMAR CANTIDAD DE KM POR CAMION",
                    "6. INFORMAR ESTADO DE VERIFICACIONES",
                ],
                "7. VOLVER AL MENÚ CAMIONES",
            ),
            {
                "1": listados.listar_todos,
                "2": listados.listar_en_viaje,
                "3": listados.listar_sin_asignar,
                "4": listados.mostrar_por_antiguedad,
                "5": listados.mostrar_km_por_camion,
                "6": listados.mostrar_verificaciones,
            },
            "7",
        )

    def menu_clientes(self) -> None:
        """The customer menu."""
        self._bucle(
            _pantalla(
                "        MENÚ CLIENTES",
                ["1. ALTA/BAJA/ACTUALIZACIÓN", "2. LISTADOS", "3. LISTADOS"],
                "4. VOLVER AL MENÚ PRINCIPAL",
            ),
            {
                "1": self.menu_clientes_abm,
                "2": self.menu_clientes_listados,
                "3": self.menu_clientes_listados,
            },
            "4",
        )

    def menu_clientes_abm(self) -> None:
        """Register customers; removal and update have no effect yet."""
        manager = ClientesManager(self.clientes, self.consola)
        self._bucle(
            _pantalla(
                "        ALTA/BAJA/MODIFICACIÓN",
                ["1. ALTA NUEVO CLIENTE", "2. BAJA CLIENTE", "3. ACTUALIZAR CLIENTE"],
                "4. VOLVER AL MENÚ CLIENTES",
            ),
            {"1": manager.alta_cliente, "2": _nada, "3": _nada},
            "4",
        )

    def menu_clientes_listados(self) -> None:
        """The customer listings."""
        manager = ClientesManager(self.clientes, self.consola)
        self._bucle(
            _pantalla(
                "        LISTADOS DE CLIENTES",
                ["1. LISTAR TODOS", "2. LISTAR EN VIAJE", "3. LISTAR DISPONIBLES INACTIVOS"],
                "4. VOLVER AL MENÚ CLIENTES",
            ),
            {"1": manager.mostrar_todos, "2": _nada, "3": _nada},
            "4",
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the main menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="logistica", description="Sistema de gestión de logística."
    )
    parser.add_argument(
        "--directorio",
        default=".",
        help="directorio donde se guardan los archivos de datos",
    )
    args = parser.parse_args(argv)
    consola = Consola(sys.stdin, sys.stdout)
    try:
        Menus(consola, args.directorio).mostrar()
    except (EOFError, KeyboardInterrupt):
        consola.escribir("\n")
    return 0