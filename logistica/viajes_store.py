"""Persistent storage of trips, one JSON record per line, addressed by position."""

from __future__ import annotations

import json
from collections.abc import Iterator
from os import PathLike
from pathlib import Path

from .viajes import Viaje

ARCHIVO_VIAJES = "viajes.dat"


class ViajesArchivo:
    """The trip file: records keep the order in which they were saved."""

    def __init__(self, path: str | PathLike[str] = ARCHIVO_VIAJES) -> None:
        self.path = Path(path)

    def _cargar(self) -> list[Viaje]:
        try:
            texto = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        return [Viaje.from_dict(json.loads(linea)) for linea in texto.splitlines() if linea.strip()]

    @staticmethod
    def _linea(viaje: Viaje) -> str:
        return json.dumps(viaje.to_dict(), ensure_ascii=False) + "\n"

    def cantidad(self) -> int:
        """Number of records; a missing file holds none."""
        return len(self._cargar())

    def leer(self, pos: int) -> Viaje:
        """Return the record at a zero-based position."""
        viajes = self._cargar()
        if not 0 <= pos < len(viajes):
            raise IndexError(f"no hay viaje en la posición {pos}")
        return viajes[pos]

    def guardar(self, viaje: Viaje) -> None:
        """Append a record at the end of the file."""
        with self.path.open("a", encoding="utf-8") as archivo:
            archivo.write(self._linea(viaje))

    def modificar(self, pos: int, viaje: Viaje) -> None:
        """Overwrite the record at an existing position."""
        viajes = self._cargar()
        if not 0 <= pos < len(viajes):
            raise IndexError(f"no hay viaje en la posición {pos}")
        viajes[pos] = viaje
        self.path.write_text("".join(self._linea(v) for v in viajes), encoding="utf-8")

    def ultimo_id(self) -> int:
        """Id of the last saved record, or 0 when there is none."""
        viajes = self._cargar()
        return viajes[-1].id_viaje if viajes else 0

    def __iter__(self) -> Iterator[Viaje]:
        return iter(self._cargar())