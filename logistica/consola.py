"""Line-oriented terminal input and output used by the interactive screens."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from typing import TextIO, TypeVar

T = TypeVar("T")

ERROR_INGRESO = "\nIngreso incorrecto, intente nuevamente: "
OPCION_INVALIDA = "Opción inválida. Por favor, intente de nuevo.\n"
_BORRAR_PANTALLA = "\033[2J\033[H"


class Consola:
    """Reads answers from one text stream and writes prompts to another."""

    def __init__(self, entrada: TextIO | None = None, salida: TextIO | None = None) -> None:
        self.entrada = entrada if entrada is not None else sys.stdin
        self.salida = salida if salida is not None else sys.stdout

    def escribir(self, texto: str = "") -> None:
        """Write text as is, without adding a newline."""
        self.salida.write(texto)
        self.salida.flush()

    def leer_linea(self, prompt: str = "") -> str:
        """Show the prompt and return the next line without its line ending."""
        if prompt:
            self.escribir(prompt)
        linea = self.entrada.readline()
        if not linea:
            raise EOFError("no hay más datos de entrada")
        return linea.rstrip("\r\n")

    def _leer_numero(
        self,
        convertir: Callable[[str], T],
        prompt: str,
        valido: Callable[[T], bool] | None,
        error: str,
    ) -> T:
        while True:
            texto = self.leer_linea(prompt).strip()
            try:
                valor = convertir(texto)
            except ValueError:
                self.escribir(error)
                continue
            if valido is None or valido(valor):
                return valor
            self.escribir(error)

    def leer_entero(
        self,
        prompt: str = "",
        valido: Callable[[int], bool] | None = None,
        error: str = ERROR_INGRESO,
    ) -> int:
        """Ask until an integer accepted by ``valido`` is entered."""
        return self._leer_numero(int, prompt, valido, error)

    def leer_float(
        self,
        prompt: str = "",
        valido: Callable[[float], bool] | None = None,
        error: str = ERROR_INGRESO,
    ) -> float:
        """Ask until a number accepted by ``valido`` is entered."""
        return self._leer_numero(float, prompt, valido, error)

    def elegir(self, prompt: str, opciones: Iterable[str]) -> str:
        """Ask until one of the given options is typed, and return it."""
        permitidas = {str(opcion) for opcion in opciones}
        while True:
            respuesta = self.leer_linea(prompt).strip()
            if respuesta in permitidas:
                return respuesta
            self.escribir(OPCION_INVALIDA)

    def pausa(self) -> None:
        """Wait for the user to press Enter; end of input just returns."""
        self.escribir("Presione Enter para continuar . . . ")
        self.entrada.readline()
        self.escribir("\n")

    def limpiar(self) -> None:
        """Clear the screen when writing to a terminal."""
        es_terminal = getattr(self.salida, "isatty", None)
        if es_terminal is not None and es_terminal():
            self.escribir(_BORRAR_PANTALLA)