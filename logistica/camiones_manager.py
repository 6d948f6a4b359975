"""Interactive screens to register, retire and re-inspect trucks."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from .camiones import Camion
from .camiones_reports import (
    VENCIDA,
    CamionesListados,
    actualizar_verificacion,
    verificacion_vencida,
)
from .camiones_store import CamionesArchivo
from .consola import Consola
from .fecha import ANIOS, DIAS, MESES, Fecha

T = TypeVar("T")

GUARDADO_CORRECTO = " Guardado correcto ✔\n"
GUARDADO_FINAL = "GUARDADO CORRECTO ✔ \n"


def _pedir(
    consola: Consola,
    leer: Callable[[str], T],
    prompt: str,
    aplicar: Callable[[T], None],
    mensaje: str,
) -> T:
    """Ask until ``aplicar`` accepts the answer without raising ValueError."""
    while True:
        valor = leer(prompt)
        try:
            aplicar(valor)
        except ValueError:
            consola.escribir(mensaje)
            continue
        consola.escribir(GUARDADO_CORRECTO)
        return valor


def _leer_no_vacia(consola: Consola) -> Callable[[str], str]:
    def leer(prompt: str) -> str:
        while True:
            texto = consola.leer_linea(prompt).lstrip()
            if texto:
                return texto
            prompt = ""

    return leer


def _pedir_fecha(consola: Consola) -> Fecha:
    """Ask for a date one field at a time."""
    fecha = Fecha()

    def campo(nombre: str, rango: range) -> Callable[[int], None]:
        def aplicar(valor: int) -> None:
            if valor not in rango:
                raise ValueError(nombre)
            setattr(fecha, nombre, valor)

        return aplicar

    _pedir(consola, consola.leer_entero, "\nDia: ", campo("dia", DIAS),
           "Dia inválido, ingrese nuevamente\n")
    _pedir(consola, consola.leer_entero, "\nMes: ", campo("mes", MESES),
           "Mes inválido, ingrese nuevamente\n")
    _pedir(consola, consola.leer_entero, "Año: ", campo("anio", ANIOS),
           "Año inválido, ingrese nuevamente\n")
    return fecha


def _confirmar(consola: Consola, prompt: str) -> bool:
    """Ask for 1 (yes) or 2 (no) and return whether the answer was 1."""
    return consola.leer_entero(prompt, valido=lambda v: v in (1, 2)) == 1


def _pedir_id(consola: Consola, prompt: str) -> int:
    """Ask for a positive record id and echo it back."""
    consola.escribir(prompt)
    elegido = consola.leer_entero("", valido=lambda v: v > 0)
    consola.escribir(f"\nID seleccionado: {elegido}\n\n")
    consola.pausa()
    return elegido


class CamionesManager:
    """Registration, removal and inspection renewal of trucks."""

    def __init__(
        self,
        archivo: CamionesArchivo,
        consola: Consola,
        reloj: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.archivo = archivo
        self.consola = consola
        self.reloj = reloj

    def alta_camion(self) -> Camion | None:
        """Ask for a new truck and save it once confirmed; return it, or None if discarded."""
        consola = self.consola
        consola.limpiar()
        camion = Camion()

        consola.escribir("\nALTA DE CAMION")

        def marca(valor: str) -> None:
            camion.marca = valor

        _pedir(consola, _leer_no_vacia(consola), "\n\nIngresar marca: ", marca,
               "\nNombre inválido, o demasiado largo. Intente de vuelta\n")

        def modelo(valor: str) -> None:
            camion.modelo = valor

        _pedir(consola, consola.leer_linea, "\n\nIngresar modelo: ", modelo,
               "\nNombre inválido, o demasiado largo. Intente de vuelta\n")

        def patente(valor: str) -> None:
            if len(valor) not in (6, 7):
                raise ValueError("patente")
            camion.patente = valor

        _pedir(consola, consola.leer_linea, "\n\nIngresar patente (AA123AA o AAA123): ", patente,
               "\nPatente inválida. Debe tener 6 O 7 caracteres. Intente de vuelta\n")

        def anio(valor: int) -> None:
            if not 1960 <= valor < 2026:
                raise ValueError("anio")
            camion.anio = valor

        _pedir(consola, consola.leer_entero, "\n\nIngresar año de patentamiento: ", anio,
               "Año inválido. Debe estar entre 1960 y 2025.\n")

        consola.escribir("\n\nIngresar fecha de última verificacion: ")
        fecha = _pedir_fecha(consola)
        camion.ultima_verificacion = fecha

        def peso(valor: float) -> None:
            camion.peso_carga = valor

        _pedir(consola, consola.leer_float,
               "\n\nPeso máximo soportado (Entre 500 y 70.000 kg): ", peso,
               "Peso fuera de rango, intente de vuelta\n")

        def volumen(valor: float) -> None:
            camion.volumen_carga = valor

        _pedir(consola, consola.leer_float,
               "\n\nVolumen máximo de carga (Entre 1 y 150 mts\u00b3): ", volumen,
               "Volumen fuera de rango, intente de vuelta\n")

        camion.id_camion = self.archivo.ultimo_id() + 1
        consola.limpiar()

        consola.escribir("RESUMEN\n")
        consola.escribir(f"\nID: {camion.id_camion}")
        consola.escribir(f"\nMarca: {camion.marca}")
        consola.escribir(f"\nModelo: {camion.modelo}")
        consola.escribir(f"\nPatente: {camion.patente}")
        consola.escribir(f"\nAño: {camion.anio}")
        consola.escribir(f"\nFecha ultima verificacion: {fecha.padded()}")
        if verificacion_vencida(fecha, self.reloj()):
            consola.escribir(
                "\nVerificacion vencida, el camion se dará de alta como "
                "'no apto para circular' hasta modificar la verificacion."
            )
            camion.apto_circular = False
        else:
            consola.escribir("\nApto Circular ✔")
        consola.escribir(f"\nPeso máximo: {camion.peso_carga:g}")
        consola.escribir(f"\nVolumen máximo: {camion.volumen_carga:g}")

        consola.escribir("\n\nConfirmar alta de camion?")
        if not _confirmar(consola, "\n1 - Confirmar\n2 - Volver a ingresar\n\n"):
            return None
        self.archivo.guardar(camion)
        consola.limpiar()
        consola.escribir(GUARDADO_FINAL)
        consola.pausa()
        return camion

    def baja_camion(self) -> bool:
        """Mark an active truck as removed; return whether one was removed."""
        consola = self.consola
        consola.limpiar()
        CamionesListados(self.archivo, consola, self.reloj).listar_todos()

        elegido = _pedir_id(
            consola, "\n\nPor favor, seleccionar el ID del camión a dar de baja: "
        )
        consola.limpiar()

        encontrado = next(
            (
                (pos, camion)
                for pos, camion in enumerate(self.archivo)
                if camion.id_camion == elegido and camion.estado
            ),
            None,
        )
        if encontrado is None:
            consola.escribir("\nEl ID seleccionado no existe en los registros\n\n")
            consola.pausa()
            return False

        posicion, camion = encontrado
        consola.escribir(camion.fila())
        consola.escribir("\n\nDesea dar de baja este camion?\n1. SI\n2. NO\n")
        consola.escribir("\n")
        if not _confirmar(consola, ""):
            return False
        camion.estado = False
        self.archivo.modificar(posicion, camion)
        consola.limpiar()
        consola.escribir(GUARDADO_FINAL)
        consola.pausa()
        return True

    def modificar_verificacion(self) -> bool:
        """Renew, as of today, the inspection of a truck whose inspection expired."""
        consola = self.consola
        hoy = self.reloj()
        actualizar_verificacion(self.archivo, hoy)
        consola.limpiar()

        consola.escribir(
            f"{'ID':<3}{'MARCA':<30}{'MODELO':<30}{'ULT. VERIF.':<15}{'ESTADO':<10}\n"
        )
        consola.escribir("-" * 87 + "\n")
        for camion in self.archivo:
            if camion.estado and verificacion_vencida(camion.ultima_verificacion, hoy):
                consola.escribir(
                    f"{camion.id_camion:<3}{camion.marca:<30}{camion.modelo:<30}"
                    f"{camion.ultima_verificacion.to_string():<15}{VENCIDA:<10}\n"
                )
        consola.escribir("\n\n")

        elegido = _pedir_id(
            consola,
            "\n\nPor favor, seleccionar el ID del camión para actualizar verificación: ",
        )

        encontrado = next(
            (
                (pos, camion)
                for pos, camion in enumerate(self.archivo)
                if camion.id_camion == elegido
                and verificacion_vencida(camion.ultima_verificacion, hoy)
            ),
            None,
        )
        consola.limpiar()
        if encontrado is None:
            consola.escribir(
                "El ID no existe o no pertenece a un camion que tenga que "
                "actualizar su verificacion\n\n"
            )
            consola.pausa()
            return False

        posicion, camion = encontrado
        ahora = self.reloj()
        fecha_hoy = Fecha(ahora.day, ahora.month, ahora.year)
        consola.escribir(
            f"SE ACTUALIZARA LA FECHA DEL CAMION PARA EL DIA DE HOY {fecha_hoy.to_string()}\n"
        )
        consola.escribir("\n1.Confirmar\n2.Volver\n")
        if not _confirmar(consola, ""):
            return False
        camion.ultima_verificacion = fecha_hoy
        self.archivo.modificar(posicion, camion)
        consola.limpiar()
        consola.escribir(GUARDADO_FINAL)
        consola.pausa()
        return True