"""Trip records: driver, origin, destination, cargo and schedule."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Callable

from .choferes import Chofer
from .ciudades import Ciudad


def _tipo_carga(valor: Any) -> str:
    texto = str(valor)
    if len(texto.encode("utf-8")) >= 30:
        raise ValueError("tipo de carga demasiado largo")
    return texto


def _distancia(valor: Any) -> float:
    distancia = float(valor)
    if distancia <= 0:
        raise ValueError("la distancia debe ser positiva")
    return distancia


def _peso(valor: Any) -> float:
    peso = float(valor)
    if not 0 <= peso <= 70000:
        raise ValueError("peso fuera de rango: entre 0 y 70000 kg")
    return peso


def _volumen(valor: Any) -> float:
    volumen = float(valor)
    if not 1 <= volumen <= 150:
        raise ValueError("volumen fuera de rango: entre 1 y 150 m³")
    return volumen


_VALIDADORES: dict[str, Callable[[Any], Any]] = {
    "distancia": _distancia,
    "tipo_carga": _tipo_carga,
    "peso_transportado": _peso,
    "volumen_transportado": _volumen,
}


def _dia(fecha: datetime | None) -> str:
    return "" if fecha is None else f"{fecha.day}/{fecha.month}/{fecha.year}"


@dataclass
class Viaje:
    """A trip; ``estado`` is True while it is under way."""

    id_viaje: int = 0
    chofer: Chofer = field(default_factory=Chofer)
    ciudad_origen: Ciudad = field(default_factory=Ciudad)
    ciudad_destino: Ciudad = field(default_factory=Ciudad)
    distancia: float = 1.0
    fecha_salida: datetime | None = None
    fecha_llegada: datetime | None = None
    tipo_carga: str = ""
    peso_transportado: float = 0.0
    volumen_transportado: float = 1.0
    estado: bool = False

    def __setattr__(self, name: str, value: Any) -> None:
        validar = _VALIDADORES.get(name)
        if validar is not None:
            value = validar(value)
        super().__setattr__(name, value)

    def segundos_restantes(self, ahora: datetime) -> int:
        """Whole seconds until arrival; 0 once the arrival time has passed."""
        if self.fecha_llegada is None or self.fecha_llegada < ahora:
            return 0
        return int((self.fecha_llegada - ahora).total_seconds())

    def _chofer_completo(self) -> str:
        return f"{self.chofer.nombre} {self.chofer.apellido}"

    def fila_activo(self, ahora: datetime) -> str:
        """One line of the active-trip listing, with the time left to arrival."""
        segundos = self.segundos_restantes(ahora)
        horas, resto = divmod(segundos, 3600)
        minutos = resto // 60
        return (
            f"{self.id_viaje:<3}"
            f"{self._chofer_completo():<40}"
            f"{self.ciudad_origen.ciudad:<33}"
            f"{self.ciudad_destino.ciudad:<33}"
            f"{self.tipo_carga:<30}"
            f"{horas}h {minutos}m"
        )

    def fila_historial(self) -> str:
        """One line of the trip history listing."""
        return (
            f"{self.id_viaje:<3}"
            f"{self._chofer_completo():<40}"
            f"{self.ciudad_origen.ciudad:<33}"
            f"{self.ciudad_destino.ciudad:<33}"
            f"{self.tipo_carga:<30}"
            f"{self.distancia:<15g}"
            f"{_dia(self.fecha_salida):<11}"
            f"{_dia(self.fecha_llegada):<11}"
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        for clave in ("fecha_salida", "fecha_llegada"):
            valor = getattr(self, clave)
            data[clave] = None if valor is None else valor.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Viaje:
        def fecha(valor: str | None) -> datetime | None:
            return None if valor is None else datetime.fromisoformat(valor)

        return cls(
            id_viaje=int(data["id_viaje"]),
            chofer=Chofer.from_dict(data["chofer"]),
            ciudad_origen=Ciudad.from_dict(data["ciudad_origen"]),
            ciudad_destino=Ciudad.from_dict(data["ciudad_destino"]),
            distancia=float(data["distancia"]),
            fecha_salida=fecha(data["fecha_salida"]),
            fecha_llegada=fecha(data["fecha_llegada"]),
            tipo_carga=data["tipo_carga"],
            peso_transportado=float(data["peso_transportado"]),
            volumen_transportado=float(data["volumen_transportado"]),
            estado=bool(data["estado"]),
        )