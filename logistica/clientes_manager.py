"""Interactive screens to register and list customers."""

from __future__ import annotations

from .camiones_manager import GUARDADO_FINAL, _confirmar, _pedir
from .clientes import Cliente
from .clientes_store import ClientesArchivo
from .consola import Consola

_CAMPOS: tuple[tuple[str, str, str], ...] = (
    (
        "nombre_razon_social",
        "\n\nIngresar Razon social o nombre : ",
        "\nNombre inválido, o demasiado largo. Intente de vuelta\n",
    ),
    (
        "direccion",
        "\n\nIngresar direccion: ",
        "\nDireccion inválida, o demasiado largo. Intente de vuelta\n",
    ),
    (
        "telefono",
        "\n\nIngresar Telefono: ",
        "\nTelefono inválido, o demasiado largo. Intente de vuelta\n",
    ),
    (
        "email",
        "\n\nIngresar Email: ",
        "\nApellido inválido, o demasiado largo. Intente de vuelta\n",
    ),
)


class ClientesManager:
    """Registration and listing of customers."""

    def __init__(self, archivo: ClientesArchivo, consola: Consola) -> None:
        self.archivo = archivo
        self.consola = consola

    def mostrar_todos(self) -> list[Cliente]:
        """Show every stored customer and return them."""
        consola = self.consola
        clientes = list(self.archivo)
        consola.limpiar()
        consola.escribir(
            f"{'ID':<6}{'RAZON SOCIAL / NOMBRE   ':<15}{'DIRECCION':<15}"
            f"{'TELEFONO':<15}{'EMAIL':<10}{'CANTIDAD VIAJES REALIZADOS':<10}"
        )
        consola.escribir("\n" + "-" * 112 + "\n")
        for cliente in clientes:
            consola.escribir(cliente.fila() + "\n")
        consola.escribir("\n\n")
        consola.pausa()
        return clientes

    def alta_cliente(self) -> Cliente | None:
        """Ask for a new customer and save it once confirmed; return it, or None if discarded."""
        consola = self.consola
        consola.limpiar()
        cliente = Cliente()
        consola.escribir("\nALTA CLIENTE")
        cliente.id_cliente = self.archivo.ultimo_id() + 1

        for campo, prompt, error in _CAMPOS:
            def aplicar(valor: str, campo: str = campo) -> None:
                setattr(cliente, campo, valor)

            _pedir(consola, consola.leer_linea, prompt, aplicar, error)

        consola.escribir("RESUMEN\n")
        consola.escribir(f"\nID: {cliente.id_cliente}")
        consola.escribir(f"\nRazon social / Nombre {cliente.nombre_razon_social}")
        consola.escribir(f"\nDireccion {cliente.direccion}")
        consola.escribir(f"\nTelefono {cliente.telefono}")
        consola.escribir(f"\nEmail {cliente.email}")

        consola.escribir("\n\nConfirmar alta de Cliente")
        if not _confirmar(consola, "\n1 - Confirmar\n2 - Volver a ingresar\n\n"):
            return None
        self.archivo.guardar(cliente)
        consola.limpiar()
        consola.escribir(GUARDADO_FINAL)
        return cliente