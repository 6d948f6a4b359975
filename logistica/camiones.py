"""Truck records with their validated characteristics."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Callable

from .fecha import Fecha

MESES_ANIO = 12


def _texto(limite: int, campo: str) -> Callable[[Any], str]:
    def validar(valor: Any) -> str:
        texto = str(valor)
        if len(texto.encode("utf-8")) >= limite:
            raise ValueError(f"{campo}: nombre inválido o demasiado largo")
        return texto

    return validar


def _patente(valor: Any) -> str:
    texto = str(valor)
    if texto == "":
        return texto
    if len(texto) not in (6, 7) or len(texto.encode("utf-8")) >= 8:
        raise ValueError("patente inválida: debe tener 6 o 7 caracteres")
    return texto.upper()


def _anio(valor: Any) -> int:
    anio = int(valor)
    if anio != 0 and not 1960 <= anio < 2026:
        raise ValueError("año inválido: debe estar entre 1960 y 2025")
    return anio


def _peso(valor: Any) -> float:
    peso = float(valor)
    if not 500 <= peso <= 70000:
        raise ValueError("peso fuera de rango: entre 500 y 70000 kg")
    return peso


def _volumen(valor: Any) -> float:
    volumen = float(valor)
    if not 1 <= volumen <= 150:
        raise ValueError("volumen fuera de rango: entre 1 y 150 m³")
    return volumen


def _km(valor: Any) -> list[float]:
    kms = [float(km) for km in valor]
    if len(kms) != MESES_ANIO:
        raise ValueError("se esperan 12 valores de km mensuales")
    return kms


_VALIDADORES: dict[str, Callable[[Any], Any]] = {
    "patente": _patente,
    "marca": _texto(30, "marca"),
    "modelo": _texto(30, "modelo"),
    "anio": _anio,
    "peso_carga": _peso,
    "volumen_carga": _volumen,
    "km_mensuales": _km,
}


@dataclass
class Camion:
    """A truck; assigning an out-of-range value raises ValueError."""

    id_camion: int = 0
    patente: str = ""
    marca: str = ""
    modelo: str = ""
    anio: int = 0
    peso_carga: float = 501.0
    volumen_carga: float = 2.0
    km_mensuales: list[float] = field(default_factory=lambda: [0.0] * MESES_ANIO)
    ultima_verificacion: Fecha = field(default_factory=Fecha)
    apto_circular: bool = True
    en_viaje: bool = False
    chofer_asignado: bool = False
    estado: bool = True

    def __setattr__(self, name: str, value: Any) -> None:
        validar = _VALIDADORES.get(name)
        if validar is not None:
            value = validar(value)
        super().__setattr__(name, value)

    def sumar_km(self, km: float, mes: int) -> None:
        """Add kilometres to a month numbered 1 to 12."""
        if not 1 <= mes <= MESES_ANIO:
            raise ValueError(f"mes inválido: {mes}")
        self.km_mensuales[mes - 1] += km

    def fila(self) -> str:
        """One line of the truck listing."""
        apto = "✔" if self.apto_circular else "🚫"
        disponible = "❌" if self.en_viaje else "✔"
        return (
            f"{self.id_camion:<3}"
            f"{self.patente:<10}"
            f"{self.marca:<30}"
            f"{self.modelo:<30}"
            f"{self.anio:<6}"
            f"{self.peso_carga:<7.0f}"
            f"{self.volumen_carga:<10.0f}"
            f"{self.ultima_verificacion.to_string():<16}"
            f"{apto:<8}"
            f"{disponible:<12}"
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Camion:
        return cls(
            id_camion=int(data["id_camion"]),
            patente=data["patente"],
            marca=data["marca"],
            modelo=data["modelo"],
            anio=int(data["anio"]),
            peso_carga=float(data["peso_carga"]),
            volumen_carga=float(data["volumen_carga"]),
            km_mensuales=list(data["km_mensuales"]),
            ultima_verificacion=Fecha.from_dict(data["ultima_verificacion"]),
            apto_circular=bool(data["apto_circular"]),
            en_viaje=bool(data["en_viaje"]),
            chofer_asignado=bool(data["chofer_asignado"]),
            estado=bool(data["estado"]),
        )