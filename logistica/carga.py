"""The fixed catalogue of cargo types a trip can carry."""

from __future__ import annotations

TIPOS_CARGA: tuple[str, ...] = (
    "Bebidas",
    "Granos y cereales",
    "Cemento y Cal",
    "Arena",
    "Maderas",
    "Hierros/Aceros",
    "Vidrios/Cristales",
    "Maquinaria",
    "Electrodomesticos",
    "Electronicos",
    "Herramientas y ferreteria",
    "Muebles",
    "Neumaticos/Autopartes",
    "Pinturas y solventes",
    "Textiles",
    "Papeleria/Imprenta",
    "Jueguetes/Bazar",
    "Medicamentos",
    "Paqueteria",
    "Rodados",
    "Alimentos no perecederos",
)


def tipo_carga(posicion: int) -> str:
    """Return the cargo type at a zero-based position."""
    if not 0 <= posicion < len(TIPOS_CARGA):
        raise IndexError(f"tipo de carga inexistente: {posicion}")
    return TIPOS_CARGA[posicion]


def render_tipos() -> str:
    """Return the numbered list of cargo types, one per line, starting at 1."""
    return "".join(f"{numero}. {nombre}\n" for numero, nombre in enumerate(TIPOS_CARGA, start=1))