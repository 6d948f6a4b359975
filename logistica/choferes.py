"""Driver records, each possibly carrying a copy of its assigned truck."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Callable

from .camiones import MESES_ANIO, Camion
from .fecha import Fecha


def _texto(limite: int, campo: str) -> Callable[[Any], str]:
    def validar(valor: Any) -> str:
        texto = str(valor)
        if len(texto.encode("utf-8")) >= limite:
            raise ValueError(f"{campo}: inválido o demasiado largo")
        return texto

    return validar


def _dni(valor: Any) -> int:
    dni = int(valor)
    if not 1_000_000 <= dni < 100_000_000:
        raise ValueError("DNI invalido")
    return dni


def _experiencia(valor: Any) -> int:
    experiencia = int(valor)
    if not 0 <= experiencia <= 80:
        raise ValueError("experiencia inválida: entre 0 y 80 años")
    return experiencia


def _km(valor: Any) -> list[float]:
    kms = [float(km) for km in valor]
    if len(kms) != MESES_ANIO:
        raise ValueError("se esperan 12 valores de km mensuales")
    return kms


_VALIDADORES: dict[str, Callable[[Any], Any]] = {
    "dni": _dni,
    "nombre": _texto(30, "nombre"),
    "apellido": _texto(30, "apellido"),
    "experiencia": _experiencia,
    "km_mensuales": _km,
}


@dataclass
class Chofer:
    """A driver; assigning an out-of-range value raises ValueError."""

    id_chofer: int = 0
    asignado: bool = False
    camion_asignado: Camion = field(default_factory=Camion)
    dni: int = 1_000_000
    nombre: str = ""
    apellido: str = ""
    experiencia: int = 0
    vencimiento_licencia: Fecha = field(default_factory=Fecha)
    apto_circular: bool = True
    en_viaje: bool = False
    km_mensuales: list[float] = field(default_factory=lambda: [0.0] * MESES_ANIO)
    estado: bool = True

    def __setattr__(self, name: str, value: Any) -> None:
        validar = _VALIDADORES.get(name)
        if validar is not None:
            value = validar(value)
        super().__setattr__(name, value)

    def sumar_km(self, km: float, mes: int) -> None:
        """Add a positive distance to a month numbered 1 to 12."""
        if not 1 <= mes <= MESES_ANIO:
            raise ValueError(f"mes inválido: {mes}")
        if km <= 0:
            raise ValueError("los km deben ser positivos")
        self.km_mensuales[mes - 1] += km

    def fila(self) -> str:
        """One line of the driver listing."""
        apto = "✔" if self.apto_circular else "🚫"
        en_viaje = "✔" if self.en_viaje else "❌"
        if self.asignado:
            camion = f"{self.camion_asignado.marca} {self.camion_asignado.modelo}"
        else:
            camion = "❌"
        return (
            f"{self.id_chofer:<6}"
            f"{self.dni:<10}"
            f"{self.nombre:<20}"
            f"{self.apellido:<20}"
            f"{self.experiencia:<7}"
            f"{self.vencimiento_licencia.to_string():<15}"
            f"{apto:<12}"
            f"{en_viaje:<12}"
            f"{camion:<30}"
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Chofer:
        return cls(
            id_chofer=int(data["id_chofer"]),
            asignado=bool(data["asignado"]),
            camion_asignado=Camion.from_dict(data["camion_asignado"]),
            dni=int(data["dni"]),
            nombre=data["nombre"],
            apellido=data["apellido"],
            experiencia=int(data["experiencia"]),
            vencimiento_licencia=Fecha.from_dict(data["vencimiento_licencia"]),
            apto_circular=bool(data["apto_circular"]),
            en_viaje=bool(data["en_viaje"]),
            km_mensuales=list(data["km_mensuales"]),
            estado=bool(data["estado"]),
        )