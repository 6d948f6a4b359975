"""Persistent storage of customers, one JSON record per line."""

from __future__ import annotations

import json
from collections.abc import Iterator
from os import PathLike
from pathlib import Path

from .clientes import Cliente

ARCHIVO_CLIENTES = "clientes.dat"


class ClientesArchivo:
    """The customer file: records keep the order in which they were saved."""

    def __init__(self, path: str | PathLike[str] = ARCHIVO_CLIENTES) -> None:
        self.path = Path(path)

    def _cargar(self) -> list[Cliente]:
        try:
            texto = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        return [Cliente.from_dict(json.loads(linea)) for linea in texto.splitlines() if linea.strip()]

    def cantidad(self) -> int:
        """Number of records; a missing file holds none."""
        return len(self._cargar())

    def leer(self, pos: int) -> Cliente:
        """Return the record at a zero-based position."""
        clientes = self._cargar()
        if not 0 <= pos < len(clientes):
            raise IndexError(f"no hay cliente en la posición {pos}")
        return clientes[pos]

    def guardar(self, cliente: Cliente) -> None:
        """Append a record at the end of the file."""
        with self.path.open("a", encoding="utf-8") as archivo:
            archivo.write(json.dumps(cliente.to_dict(), ensure_ascii=False) + "\n")

    def ultimo_id(self) -> int:
        """Id of the last saved record, or 0 when there is none."""
        clientes = self._cargar()
        return clientes[-1].id_cliente if clientes else 0

    def __iter__(self) -> Iterator[Cliente]:
        return iter(self._cargar())