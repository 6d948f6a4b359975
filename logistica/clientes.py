"""Customer records."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

_LIMITES = {
    "nombre_razon_social": 50,
    "direccion": 50,
    "telefono": 15,
    "email": 50,
}


@dataclass
class Cliente:
    """A customer; text fields are limited to the size of their stored field."""

    id_cliente: int = 1
    nombre_razon_social: str = ""
    direccion: str = ""
    telefono: str = ""
    email: str = ""
    cantidad_viajes_realizados: int = 0

    def __setattr__(self, name: str, value: Any) -> None:
        limite = _LIMITES.get(name)
        if limite is not None and len(str(value).encode("utf-8")) >= limite:
            raise ValueError(f"{name}: debe tener menos de {limite} caracteres")
        super().__setattr__(name, value)

    def fila(self) -> str:
        """One line of the customer listing."""
        return (
            f"{self.id_cliente:<3}"
            f"{self.nombre_razon_social:<10}"
            f"{self.direccion:<30}"
            f"{self.telefono:<30}"
            f"{self.email:<6}"
            f"{self.cantidad_viajes_realizados:<7}"
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Cliente:
        return cls(
            id_cliente=int(data["id_cliente"]),
            nombre_razon_social=data["nombre_razon_social"],
            direccion=data["direccion"],
            telefono=data["telefono"],
            email=data["email"],
            cantidad_viajes_realizados=int(data["cantidad_viajes_realizados"]),
        )