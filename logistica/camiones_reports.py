"""Truck listings and the yearly technical-inspection check."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import date, datetime, timedelta

from .camiones import Camion
from .camiones_store import CamionesArchivo
from .consola import Consola
from .fecha import Fecha

VENCIDA = "❗VENCIDA"
VIGENTE = "✔"
NO_APTO = "🚫"
NO_ASIGNADO = "✖"
MESES = ("ENE", "FEB", "MAR", "ABR", "MAY", "JUN", "JUL", "AGO", "SEP", "OCT", "NOV", "DIC")


def _como_datetime(hoy: date) -> datetime:
    if isinstance(hoy, datetime):
        return hoy
    return datetime.combine(hoy, datetime.min.time())


def vencimiento(fecha: Fecha) -> datetime | None:
    """Midnight one year after ``fecha``, normalising overflowing days; None if unrepresentable."""
    indice = (fecha.anio + 1) * 12 + fecha.mes - 1
    anio, mes = divmod(indice, 12)
    try:
        return datetime(anio, mes + 1, 1) + timedelta(days=fecha.dia - 1)
    except (ValueError, OverflowError):
        return None


def verificacion_vencida(fecha: Fecha, hoy: date) -> bool:
    """True once a full year has passed since the date of the last inspection."""
    limite = vencimiento(fecha)
    if limite is None:
        return True
    return _como_datetime(hoy) >= limite


def actualizar_verificacion(archivo: CamionesArchivo, hoy: date) -> int:
    """Bring the road-worthiness flag of every active truck up to date; return how many changed."""
    cambios = 0
    for pos, camion in enumerate(archivo):
        if not camion.estado:
            continue
        apto = not verificacion_vencida(camion.ultima_verificacion, hoy)
        if camion.apto_circular != apto:
            camion.apto_circular = apto
            archivo.modificar(pos, camion)
            cambios += 1
    return cambios


def por_antiguedad(camiones: Iterable[Camion]) -> list[Camion]:
    """Active trucks, newest first; trucks of the same year keep their order."""
    return sorted((c for c in camiones if c.estado), key=lambda c: c.anio, reverse=True)


class CamionesListados:
    """The truck listings and reports shown on the console."""

    def __init__(
        self,
        archivo: CamionesArchivo,
        consola: Consola,
        reloj: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.archivo = archivo
        self.consola = consola
        self.reloj = reloj

    def _preparar(self) -> list[Camion]:
        actualizar_verificacion(self.archivo, self.reloj())
        self.consola.limpiar()
        return list(self.archivo)

    def _terminar(self) -> None:
        self.consola.escribir("\n\n")
        self.consola.pausa()

    @staticmethod
    def _fila_detalle(camion: Camion) -> str:
        return (
            f"{camion.id_camion:<3}"
            f"{camion.patente:<10}"
            f"{camion.marca:<30}"
            f"{camion.modelo:<30}"
            f"{camion.anio:<7}"
            f"{camion.peso_carga:<7.0f}"
            f"{camion.volumen_carga:<10.0f}"
            f"{camion.ultima_verificacion.to_string():<16}"
        )

    def listar_todos(self) -> None:
        """List every active truck."""
        camiones = self._preparar()
        self.consola.escribir(
            f"{'ID':<3}{'PATENTE':<10}{'MARCA':<30}{'MODELO':<30}{'AÑO':<7}"
            f"{'PESO':<7}{'VOLUMEN':<10}{'VERIFICACION':<16}{'APTO':<6}{'DISP.':<6}"
        )
        self.consola.escribir("\n" + "-" * 125 + "\n")
        for camion in camiones:
            if camion.estado:
                self.consola.escribir(camion.fila() + "\n")
        self._terminar()

    def listar_en_viaje(self) -> None:
        """List the active trucks that are on a trip."""
        camiones = self._preparar()
        self.consola.escribir(f"{'ID':<3}{'MARCA':<30}{'MODELO':<30}\n")
        self.consola.escribir("-" * 62 + "\n")
        for camion in camiones:
            if camion.estado and camion.en_viaje:
                self.consola.escribir(
                    f"{camion.id_camion:<3}{camion.marca:<30}{camion.modelo:<30}"
                    f"{'En viaje 🚚🧭':<10}\n"
                )
        self._terminar()

    def listar_sin_asignar(self) -> None:
        """List the active trucks that no driver has been given."""
        camiones = self._preparar()
        self.consola.escribir(
            f"{'ID':<3}{'PATENTE':<10}{'MARCA':<30}{'MODELO':<30}{'AÑO':<7}"
            f"{'PESO':<7}{'VOLUMEN':<10}{'VERIFICACION':<16}{'APTO':<6}"
        )
        self.consola.escribir("\n" + "-" * 125 + "\n")
        for camion in camiones:
            if camion.estado and not camion.chofer_asignado:
                apto = VIGENTE if camion.apto_circular else NO_APTO
                self.consola.escribir(f"{self._fila_detalle(camion)}{apto:<6}\n")
        self._terminar()

    def mostrar_km_por_camion(self) -> None:
        """Show the kilometres of each month for every active truck."""
        camiones = self._preparar()
        meses = "".join(f"{mes:<5}" for mes in MESES)
        self.consola.escribir(f"{'ID':<3}{'MARCA':<30}{'MODELO':<30}{meses}\n")
        self.consola.escribir("-" * 122 + "\n")
        for camion in camiones:
            if camion.estado:
                kms = "".join(f"{km:<5.0f}" for km in camion.km_mensuales)
                self.consola.escribir(
                    f"{camion.id_camion:<3}{camion.marca:<30}{camion.modelo:<30}{kms}\n"
                )
        self._terminar()

    def mostrar_verificaciones(self) -> None:
        """Show whether the inspection of every active truck is still valid."""
        camiones = self._preparar()
        hoy = self.reloj()
        self.consola.escribir(
            f"{'ID':<3}{'MARCA':<30}{'MODELO':<30}{'ULT. VERIF.':<15}{'ESTADO':<10}\n"
        )
        self.consola.escribir("-" * 87 + "\n")
        for camion in camiones:
            if camion.estado:
                estado = VENCIDA if verificacion_vencida(camion.ultima_verificacion, hoy) else VIGENTE
                self.consola.escribir(
                    f"{camion.id_camion:<3}{camion.marca:<30}{camion.modelo:<30}"
                    f"{camion.ultima_verificacion.to_string():<15}{estado:<10}\n"
                )
        self._terminar()

    def mostrar_por_antiguedad(self) -> None:
        """List the active trucks from newest to oldest."""
        camiones = por_antiguedad(self._preparar())
        self.consola.escribir(
            f"{'ID':<3}{'PATENTE':<10}{'MARCA':<30}{'MODELO':<30}{'AÑO':<7}"
            f"{'PESO':<7}{'VOLUMEN':<10}{'VERIFICACION':<16}{'APTO':<6}{'ASIGNADO':<10}"
        )
        self.consola.escribir("\n" + "-" * 125 + "\n")
        for camion in camiones:
            apto = VIGENTE if camion.apto_circular else NO_APTO
            asignado = VIGENTE if camion.chofer_asignado else NO_ASIGNADO
            self.consola.escribir(f"{self._fila_detalle(camion)}{apto:<10}{asignado:<10}\n")
        self._terminar()