import pytest

from logistica.camiones import Camion
from logistica.fecha import Fecha


def _camion():
    return Camion(
        id_camion=3,
        patente="ab123cd",
        marca="Iveco",
        modelo="Stralis",
        anio=2020,
        peso_carga=20000,
        volumen_carga=80,
        ultima_verificacion=Fecha(10, 4, 2024),
    )


def test_defaults_follow_the_source():
    camion = Camion()
    assert camion.peso_carga == 501
    assert camion.volumen_carga == 2
    assert camion.km_mensuales == [0.0] * 12
    assert camion.apto_circular is True
    assert camion.estado is True
    assert camion.en_viaje is False


def test_patente_is_upper_cased():
    assert _camion().patente == "AB123CD"


@pytest.mark.parametrize("patente", ["ab12", "abc12345", "a"])
def test_patente_length_must_be_six_or_seven(patente):
    with pytest.raises(ValueError):
        Camion(patente=patente)


@pytest.mark.parametrize(
    "campo, valor",
    [
        ("anio", 1959),
        ("anio", 2026),
        ("peso_carga", 499),
        ("peso_carga", 70001),
        ("volumen_carga", 0.5),
        ("volumen_carga", 151),
        ("marca", "m" * 30),
        ("modelo", "m" * 30),
    ],
)
def test_out_of_range_values_rejected(campo, valor):
    camion = _camion()
    anterior = getattr(camion, campo)
    with pytest.raises(ValueError):
        setattr(camion, campo, valor)
    assert getattr(camion, campo) == anterior


def test_range_limits_are_inclusive():
    camion = _camion()
    camion.peso_carga = 500
    camion.volumen_carga = 150
    camion.anio = 1960
    assert (camion.peso_carga, camion.volumen_carga, camion.anio) == (500, 150, 1960)


def test_sumar_km_accumulates_per_month():
    camion = _camion()
    camion.sumar_km(100, 1)
    camion.sumar_km(50, 1)
    camion.sumar_km(30, 12)
    assert camion.km_mensuales[0] == 150
    assert camion.km_mensuales[11] == 30
    assert sum(camion.km_mensuales) == 180


@pytest.mark.parametrize("mes", [0, 13])
def test_sumar_km_rejects_bad_month(mes):
    with pytest.raises(ValueError):
        _camion().sumar_km(10, mes)


def test_dict_round_trip():
    camion = _camion()
    camion.sumar_km(42, 6)
    assert Camion.from_dict(camion.to_dict()) == camion


def test_fila_shows_state_marks():
    camion = _camion()
    assert camion.fila().startswith("3  AB123CD")
    camion.apto_circular = False
    camion.en_viaje = True
    fila = camion.fila()
    assert "🚫" in fila
    assert "❌" in fila