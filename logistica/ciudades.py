"""Cities with coordinates: file reading, name search and great-circle distance."""

from __future__ import annotations

import math
import struct
from dataclasses import asdict, dataclass
from os import PathLike
from pathlib import Path
from typing import Any, Iterable

from .consola import Consola

RADIO_TIERRA_KM = 6371.0

_FORMATO = struct.Struct("<50s50s50s2xdd")
TAMANIO_REGISTRO = _FORMATO.size


def _decodificar(crudo: bytes) -> str:
    texto = crudo.split(b"\0", 1)[0]
    try:
        return texto.decode("utf-8")
    except UnicodeDecodeError:
        return texto.decode("latin-1")


@dataclass
class Ciudad:
    """A city with its code, province and coordinates in degrees."""

    codigo: str = ""
    provincia: str = ""
    ciudad: str = ""
    lat: float = 0.0
    lng: float = 0.0

    def distancia_a(self, otra: Ciudad) -> float:
        """Haversine distance in kilometres."""
        lat1, lon1 = math.radians(self.lat), math.radians(self.lng)
        lat2, lon2 = math.radians(otra.lat), math.radians(otra.lng)
        dlat = lat2 - lat1
        dlng = lon2 - lon1
        a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return RADIO_TIERRA_KM * c

    def describir(self) -> str:
        return (
            f"Codigo: {self.codigo}\n"
            f"Provincia: {self.provincia}\n"
            f"Ciudad: {self.ciudad}\n"
            f"Latitud: {self.lat:.6f}\n"
            f"Longitud: {self.lng:.6f}\n"
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Ciudad:
        return cls(
            codigo=data["codigo"],
            provincia=data["provincia"],
            ciudad=data["ciudad"],
            lat=float(data["lat"]),
            lng=float(data["lng"]),
        )


def parse_registro(data: bytes) -> Ciudad:
    """Decode one fixed-size city record."""
    if len(data) != TAMANIO_REGISTRO:
        raise ValueError(f"un registro de ciudad ocupa {TAMANIO_REGISTRO} bytes, no {len(data)}")
    codigo, provincia, ciudad, lat, lng = _FORMATO.unpack(data)
    return Ciudad(_decodificar(codigo), _decodificar(provincia), _decodificar(ciudad), lat, lng)


def leer_ciudades(path: str | PathLike[str]) -> list[Ciudad]:
    """Read every complete record of a city data file."""
    contenido = Path(path).read_bytes()
    completos = len(contenido) - len(contenido) % TAMANIO_REGISTRO
    return [
        parse_registro(contenido[inicio : inicio + TAMANIO_REGISTRO])
        for inicio in range(0, completos, TAMANIO_REGISTRO)
    ]


def _umbral(largo: int) -> int:
    if largo < 6:
        return largo - 2
    if largo < 9:
        return largo - 3
    return largo - 4


def coincidencias(nombre: str, ciudades: Iterable[Ciudad]) -> list[Ciudad]:
    """Cities whose names agree with ``nombre`` in enough positions."""
    buscado = nombre.upper()
    if len(buscado) < 2:
        return []
    minimo = _umbral(len(buscado))
    resultado = []
    for ciudad in ciudades:
        iguales = sum(
            1 for a, b in zip(ciudad.ciudad.upper(), buscado) if a == b and a != " "
        )
        if iguales >= minimo:
            resultado.append(ciudad)
    return resultado


def _mostrar_coincidencias(nombre: str, ciudades: list[Ciudad], consola: Consola) -> None:
    consola.escribir("\nERROR EN LA BUSQUEDA, ESTAS SON ALGUNAS SUGERENCIAS: \n")
    sugerencias = coincidencias(nombre, ciudades)
    for ciudad in sugerencias:
        consola.escribir(f"{ciudad.ciudad} -- {ciudad.provincia}\n")
    if sugerencias:
        consola.escribir("\n\nPor favor, intentá de nuevo\n")
    else:
        consola.escribir("\nNo se encontraron sugerencias\n\n")


def buscar_ciudad(ciudades: Iterable[Ciudad], consola: Consola) -> Ciudad:
    """Ask for a city name until the user confirms one of the exact matches."""
    lista = list(ciudades)
    while True:
        nombre = consola.leer_linea("Ingrese el nombre : ")
        buscado = nombre.upper()
        for ciudad in lista:
            if ciudad.ciudad.upper() != buscado:
                continue
            consola.escribir(ciudad.describir())
            decision = consola.leer_entero(
                "\nEsta es la ciudad buscada? (SI = 1 / NO = 0)\n",
                valido=lambda v: v in (0, 1),
                error="\nIngreso incorrecto, intenta de nuevo\n",
            )
            consola.escribir("\n")
            if decision == 1:
                return ciudad
        _mostrar_coincidencias(nombre, lista, consola)