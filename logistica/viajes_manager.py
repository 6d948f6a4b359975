"""Creating trips step by step and listing active and finished trips."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta
from os import PathLike

from .camiones_reports import actualizar_verificacion
from .camiones_store import CamionesArchivo
from .carga import TIPOS_CARGA, render_tipos, tipo_carga
from .choferes import Chofer
from .choferes_asignacion import sincronizar_camiones_asignados
from .choferes_reports import actualizar_licencia
from .choferes_store import ChoferesArchivo
from .ciudades import buscar_ciudad, leer_ciudades
from .consola import Consola
from .viajes import Viaje
from .viajes_store import ViajesArchivo

VELOCIDAD_PROMEDIO = 90.0
FACTOR_RUTA = 1.2
ARCHIVO_CIUDADES = "Ciudades/datos2.bin"
GUARDADO_CORRECTO = " Guardado correcto ✔\n"

_AVISO_CHOFERES = (
    "\nA continuación, se mostrará una lista con los choferes disponibles para realizar el viaje"
    "\n\nRecordar: "
    "\n\n- Para que un chofer aparezca como opción, debe tener un camion asignado previamente"
    "\n- Los choferes se mostrarán, si es que sus camiones pueden transportar la carga "
    "de acuerdo al peso y volumen."
    "\n- El chofer estará disponible, solo si tiene vigente la licencia, y su camión tiene "
    "vigente la verificicación técnica."
    "\n\n"
)


def choferes_disponibles(choferes: Iterable[Chofer], peso: float, volumen: float) -> list[Chofer]:
    """Drivers able to take a load: active, fit, free and with a fit truck big enough."""
    return [
        chofer
        for chofer in choferes
        if chofer.estado
        and chofer.asignado
        and chofer.apto_circular
        and not chofer.en_viaje
        and chofer.camion_asignado.apto_circular
        and peso < chofer.camion_asignado.peso_carga
        and volumen < chofer.camion_asignado.volumen_carga
    ]


def tiempo_estimado(distancia: float) -> tuple[int, int]:
    """Whole hours and minutes needed at the average speed."""
    horas_totales = distancia / VELOCIDAD_PROMEDIO
    horas = int(horas_totales)
    minutos = int((horas_totales - horas) * 60)
    return horas, minutos


def calcular_llegada(salida: datetime, distancia: float) -> datetime:
    """Arrival time when leaving at ``salida`` and driving at the average speed."""
    segundos = int(distancia / VELOCIDAD_PROMEDIO * 3600)
    return salida + timedelta(seconds=segundos)


def actualizar_estados(archivo: ViajesArchivo, ahora: datetime) -> int:
    """Close every active trip whose arrival time has passed; return how many."""
    cerrados = 0
    for pos, viaje in enumerate(archivo):
        if viaje.estado and viaje.segundos_restantes(ahora) == 0:
            viaje.estado = False
            archivo.modificar(pos, viaje)
            cerrados += 1
    return cerrados


def _dia_hora(fecha: datetime | None) -> str:
    if fecha is None:
        return ""
    return f"{fecha.day}/{fecha.month}/{fecha.year}   {fecha.hour}:{fecha.minute}"


class ViajesManager:
    """The trip creation wizard and the trip listings."""

    demora = 1.0

    def __init__(
        self,
        viajes: ViajesArchivo,
        choferes: ChoferesArchivo,
        camiones: CamionesArchivo,
        ciudades_path: str | PathLike[str] = ARCHIVO_CIUDADES,
        consola: Consola | None = None,
        reloj: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.viajes = viajes
        self.choferes = choferes
        self.camiones = camiones
        self.ciudades_path = ciudades_path
        self.consola = consola if consola is not None else Consola()
        self.reloj = reloj

    def crear_viaje(self) -> Viaje | None:
        """Run every step of trip creation; return the saved trip, or None if no driver fits."""
        self.consola.escribir("\nSECCION DE CREACION DE VIAJES\n")
        viaje = Viaje()
        self.seleccionar_carga(viaje)
        if not self.seleccionar_chofer(viaje):
            return None
        self.seleccionar_ciudades(viaje)
        self.calcular_tiempo(viaje)
        self.mostrar_resumen(viaje)
        self.consola.pausa()
        return viaje

    def seleccionar_carga(self, viaje: Viaje) -> None:
        """Ask for the cargo type, weight and volume."""
        consola = self.consola
        while True:
            consola.limpiar()
            consola.escribir("\nPor favor, seleccionar el ID de tipo de carga a transportar: \n\n")
            consola.escribir(render_tipos())
            consola.escribir("\n")
            opcion = consola.leer_entero("")
            if 1 <= opcion <= len(TIPOS_CARGA):
                viaje.tipo_carga = tipo_carga(opcion - 1)
                consola.escribir(f"\nOpcion guardada '{viaje.tipo_carga}'\n")
                break
            consola.escribir("\nOpcion invalida, intente de nuevo\n")

        consola.escribir("\n\nIndicar peso de la carga a transportar (máximo 70 mil kg.) : ")
        viaje.peso_transportado = consola.leer_float("", valido=lambda p: 0 < p <= 70000)
        consola.escribir(GUARDADO_CORRECTO)

        consola.escribir(
            "\n\nIndicar volumen de la carga a transportar (máximo 150 mts\u00b3) : "
        )
        viaje.volumen_transportado = consola.leer_float("", valido=lambda v: 1 <= v <= 150)
        consola.escribir(GUARDADO_CORRECTO)

    def seleccionar_chofer(self, viaje: Viaje) -> bool:
        """List the drivers able to take the load and let the user pick one."""
        consola = self.consola
        consola.limpiar()
        consola.escribir(_AVISO_CHOFERES)
        consola.pausa()

        hoy = self.reloj()
        actualizar_licencia(self.choferes, hoy)
        actualizar_verificacion(self.camiones, hoy)
        sincronizar_camiones_asignados(self.choferes, self.camiones)

        consola.limpiar()
        consola.escribir(
            f"{'ID':<6}{'DNI':<10}{'NOMBRE':<20}{'APELLIDO':<20}{'EXP.':<7}"
            f"{'VENC. LIC.':<15}{'APTO':<8}{'EN VIAJE':<12}{'CAMIÓN':<30}"
        )
        consola.escribir("\n" + "-" * 125 + "\n")
        disponibles = choferes_disponibles(
            self.choferes, viaje.peso_transportado, viaje.volumen_transportado
        )
        for chofer in disponibles:
            consola.escribir(chofer.fila() + "\n")

        if not disponibles:
            consola.limpiar()
            consola.escribir("\n\nNo hay choferes disponibles en este momento\n\n")
            consola.pausa()
            return False

        consola.escribir("\n\n")
        consola.pausa()
        por_id = {chofer.id_chofer: chofer for chofer in disponibles}
        elegido = consola.leer_entero(
            "Por favor, seleccionar el ID del chofer para el viaje: ",
            valido=lambda v: v in por_id,
        )
        viaje.chofer = por_id[elegido]
        return True

    def seleccionar_ciudades(self, viaje: Viaje) -> None:
        """Ask for origin and destination and set the road distance between them."""
        consola = self.consola
        consola.limpiar()
        ciudades = leer_ciudades(self.ciudades_path)

        consola.escribir("\nBusqueda de la 1er ciudad\n\n")
        origen = buscar_ciudad(ciudades, consola)
        consola.escribir("\nBusqueda de la 2da ciudad:\n\n")
        destino = buscar_ciudad(ciudades, consola)

        distancia = FACTOR_RUTA * origen.distancia_a(destino)
        consola.escribir(
            f"\n\nDistancia entre {origen.ciudad} y {destino.ciudad}: {distancia:g} km\n\n"
        )
        viaje.ciudad_origen = origen
        viaje.ciudad_destino = destino
        try:
            viaje.distancia = distancia
        except ValueError:
            pass
        consola.pausa()

    def calcular_tiempo(self, viaje: Viaje) -> None:
        """Set departure to now and arrival from the distance at the average speed."""
        consola = self.consola
        consola.limpiar()
        horas, minutos = tiempo_estimado(viaje.distancia)
        consola.escribir(
            f"Tiempo Estimado: {horas}hs {minutos}min (para una velocidad promedio de "
            f"{VELOCIDAD_PROMEDIO:g} km/h)\n"
        )
        salida = self.reloj()
        llegada = calcular_llegada(salida, viaje.distancia)
        viaje.fecha_salida = salida
        viaje.fecha_llegada = llegada
        consola.escribir(
            f"\nFecha de llegada: {llegada.day}/{llegada.month}/{llegada.year}"
            f" a las  {llegada.hour:02d}:{llegada.minute:02d} hs\n\n"
        )
        consola.pausa()

    def mostrar_resumen(self, viaje: Viaje) -> Viaje:
        """Show the trip summary and save it as an active trip."""
        consola = self.consola
        consola.limpiar()
        viaje.id_viaje = self.viajes.ultimo_id() + 1
        viaje.estado = True
        chofer = viaje.chofer
        consola.escribir(
            f"\n🆔 Viaje: {viaje.id_viaje}"
            f"\n🧑‍✈️ Chofer: {chofer.nombre}  {chofer.apellido} (ID = {chofer.id_chofer})"
            f"\n📍 Origen: {viaje.ciudad_origen.ciudad} -- {viaje.ciudad_origen.provincia}"
            f"\n🏁 Destino: {viaje.ciudad_destino.ciudad} -- {viaje.ciudad_destino.provincia}"
            f"\n🛣️ Distancia: {viaje.distancia:.1f} km"
            f"\n⏱️ Salida: {_dia_hora(viaje.fecha_salida)}"
            f"\n⏱️ Llegada: {_dia_hora(viaje.fecha_llegada)}"
            f"\n📦 Carga transportada: {viaje.tipo_carga}"
            f"\n⚖️ Peso transportado: {viaje.peso_transportado:.1f}"
            f"\n🧊 Volumen transportado: {viaje.volumen_transportado:.1f}"
            "\n\n"
        )
        self.viajes.guardar(viaje)

        consola.escribir("🚚")
        time.sleep(self.demora)
        for _ in range(3):
            consola.escribir("💨")
            time.sleep(self.demora)
        consola.escribir(" VIAJE CREADO CORRECTAMENTE  ✔️\n\n")
        consola.pausa()
        return viaje

    def listar_activos(self) -> None:
        """List the trips still under way with the time left."""
        consola = self.consola
        consola.limpiar()
        ahora = self.reloj()
        actualizar_estados(self.viajes, ahora)
        consola.escribir(
            f"{'ID':<3}{'Chofer':<40}{'Origen':<33}{'Destino':<33}{'Carga':<30}{'Llegada en':<20}"
        )
        consola.escribir("\n" + "-" * 159 + "\n")
        for viaje in self.viajes:
            if viaje.estado:
                consola.escribir(viaje.fila_activo(ahora) + "\n")
        consola.escribir("\n\n")
        consola.pausa()

    def listar_historial(self) -> None:
        """List the finished trips."""
        consola = self.consola
        consola.limpiar()
        actualizar_estados(self.viajes, self.reloj())
        consola.escribir(
            f"{'ID':<3}{'Chofer':<40}{'Origen':<33}{'Destino':<33}{'Carga':<30}"
            f"{'Distancia':<15}{'Salida':<11}{'Llegada':<11}"
        )
        consola.escribir("\n" + "-" * 176 + "\n")
        for viaje in self.viajes:
            if not viaje.estado:
                consola.escribir(viaje.fila_historial() + "\n")
        consola.escribir("\n\n")
        consola.escribir(
            "Ingresar un ID de viaje para obtener informacion mas detallada del mismo\n\n"
        )
        consola.pausa()