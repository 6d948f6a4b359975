"""Persistent storage of drivers, one JSON record per line, addressed by position."""

from __future__ import annotations

import json
from collections.abc import Iterator
from os import PathLike
from pathlib import Path

from .choferes import Chofer

ARCHIVO_CHOFERES = "choferes.dat"


class ChoferesArchivo:
    """The driver file: records keep the order in which they were saved."""

    def __init__(self, path: str | PathLike[str] = ARCHIVO_CHOFERES) -> None:
        self.path = Path(path)

    def _cargar(self) -> list[Chofer]:
        try:
            texto = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        return [Chofer.from_dict(json.loads(linea)) for linea in texto.splitlines() if linea.strip()]

    @staticmethod
    def _linea(chofer: Chofer) -> str:
        return json.dumps(chofer.to_dict(), ensure_ascii=False) + "\n"

    def cantidad(self) -> int:
        """Number of records; a missing file holds none."""
        return len(self._cargar())

    def leer(self, pos: int) -> Chofer:
        """Return the record at a zero-based position."""
        choferes = self._cargar()
        if not 0 <= pos < len(choferes):
            raise IndexError(f"no hay chofer en la posición {pos}")
        return choferes[pos]

    def guardar(self, chofer: Chofer) -> None:
        """Append a record at the end of the file."""
        with self.path.open("a", encoding="utf-8") as archivo:
            archivo.write(self._linea(chofer))

    def modificar(self, pos: int, chofer: Chofer) -> None:
        """Overwrite the record at an existing position."""
        choferes = self._cargar()
        if not 0 <= pos < len(choferes):
            raise IndexError(f"no hay chofer en la posición {pos}")
        choferes[pos] = chofer
        self.path.write_text("".join(self._linea(c) for c in choferes), encoding="utf-8")

    def buscar_posicion(self, id_chofer: int) -> int | None:
        """Position of the first record with the given id, or None."""
        return next(
            (pos for pos, chofer in enumerate(self) if chofer.id_chofer == id_chofer),
            None,
        )

    def ultimo_id(self) -> int:
        """Id of the last saved record, or 0 when there is none."""
        choferes = self._cargar()
        return choferes[-1].id_chofer if choferes else 0

    def __iter__(self) -> Iterator[Chofer]:
        return iter(self._cargar())