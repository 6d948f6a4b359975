"""Calendar dates entered by the user: day, month and year."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

DIAS = range(1, 32)
MESES = range(1, 13)
ANIOS = range(1901, 2100)


@dataclass
class Fecha:
    """A day/month/year date; all zero means no date was entered."""

    dia: int = 0
    mes: int = 0
    anio: int = 0

    def cargar(self, dia: int, mes: int, anio: int) -> None:
        """Set the date field by field, raising ValueError at the first invalid one."""
        if dia not in DIAS:
            raise ValueError("Dia incorrecto")
        self.dia = dia
        if mes not in MESES:
            raise ValueError("Mes incorrecto")
        self.mes = mes
        if anio not in ANIOS:
            raise ValueError("Año incorrecto")
        self.anio = anio

    def to_string(self) -> str:
        """Format as d/m/yyyy without padding."""
        return f"{self.dia}/{self.mes}/{self.anio}"

    def padded(self) -> str:
        """Format as dd/mm/yyyy."""
        return f"{self.dia:02d}/{self.mes:02d}/{self.anio}"

    def __str__(self) -> str:
        return self.to_string()

    def to_dict(self) -> dict[str, int]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Fecha:
        return cls(dia=int(data["dia"]), mes=int(data["mes"]), anio=int(data["anio"]))