"""Persistent storage of trucks, one JSON record per line, addressed by position."""

from __future__ import annotations

import json
from collections.abc import Iterator
from os import PathLike
from pathlib import Path

from .camiones import Camion

ARCHIVO_CAMIONES = "camiones.dat"


class CamionesArchivo:
    """The truck file: records keep the order in which they were saved."""

    def __init__(self, path: str | PathLike[str] = ARCHIVO_CAMIONES) -> None:
        self.path = Path(path)

    def _cargar(self) -> list[Camion]:
        try:
            texto = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        return [Camion.from_dict(json.loads(linea)) for linea in texto.splitlines() if linea.strip()]

    @staticmethod
    def _linea(camion: Camion) -> str:
        return json.dumps(camion.to_dict(), ensure_ascii=False) + "\n"

    def cantidad(self) -> int:
        """Number of records; a missing file holds none."""
        return len(self._cargar())

    def leer(self, pos: int) -> Camion:
        """Return the record at a zero-based position."""
        camiones = self._cargar()
        if not 0 <= pos < len(camiones):
            raise IndexError(f"no hay camión en la posición {pos}")
        return camiones[pos]

    def guardar(self, camion: Camion) -> None:
        """Append a record at the end of the file."""
        with self.path.open("a", encoding="utf-8") as archivo:
            archivo.write(self._linea(camion))

    def modificar(self, pos: int, camion: Camion) -> None:
        """Overwrite the record at an existing position."""
        camiones = self._cargar()
        if not 0 <= pos < len(camiones):
            raise IndexError(f"no hay camión en la posición {pos}")
        camiones[pos] = camion
        self.path.write_text("".join(self._linea(c) for c in camiones), encoding="utf-8")

    def ultimo_id(self) -> int:
        """Id of the last saved record, or 0 when there is none."""
        camiones = self._cargar()
        return camiones[-1].id_camion if camiones else 0

    def buscar_por_id(self, id_camion: int) -> Camion | None:
        """First record with the given id, or None."""
        return next((camion for camion in self if camion.id_camion == id_camion), None)

    def __iter__(self) -> Iterator[Camion]:
        return iter(self._cargar())