"""
Pruebas de punta a punta del pipeline lineal (sin dagster).
"""
import pytest

from covid_positividad.analisis_manual import ejecutar_pipeline
from covid_positividad.configuracion import COLUMNAS_DIARIAS, COLUMNAS_ESPERADAS, PREGUNTA
from covid_positividad.errores import CovidPipelineError, DivisionPorCeroError, PaisNoEncontradoError
from covid_positividad.reporte import formatear_reporte

from conftest import escribir_csv, fila


def test_escenario_dos_paises(csv_dos_paises):
    reporte = ejecutar_pipeline(str(csv_dos_paises), verbose=False)
    assert reporte.top10["Country_Region"].tolist() == ["Testland", "Sampleland"]
    assert reporte.top10["daily_tested"].tolist() == [100.0, 50.0]
    assert reporte.ratios["Testland"] == pytest.approx(0.10)
    assert reporte.ratios["Sampleland"] == pytest.approx(0.50)
    assert reporte.respuesta.index[0] == "Sampleland"
    assert reporte.pregunta == PREGUNTA


def test_filas_subnacionales_excluidas(csv_con_provincias):
    reporte = ejecutar_pipeline(str(csv_con_provincias), verbose=False)
    assert len(reporte.original) == 3
    assert len(reporte.filtrado) == 2
    sumas = reporte.top10.set_index("Country_Region")["daily_tested"]
    assert sumas["Sampleland"] == 50.0
    assert reporte.ratios["Sampleland"] == pytest.approx(0.50)


def test_top10_y_empates_de_ratio(csv_doce_paises):
    reporte = ejecutar_pipeline(str(csv_doce_paises), verbose=False)
    assert len(reporte.top10) == 10
    assert reporte.top10["Country_Region"].tolist() == [f"Pais{i:02d}" for i in range(11, 1, -1)]
    assert "Pais00" not in reporte.ratios.index
    # todos los ratios valen 0.03: gana el orden del top 10
    assert reporte.respuesta.index.tolist() == ["Pais11", "Pais10", "Pais09"]
    assert reporte.respuesta.tolist() == pytest.approx([0.03, 0.03, 0.03])


def test_reporte_contiene_tablas_intermedias(csv_con_provincias):
    reporte = ejecutar_pipeline(str(csv_con_provincias), verbose=False)
    assert reporte.columnas == COLUMNAS_ESPERADAS
    assert list(reporte.diario.columns) == COLUMNAS_DIARIAS
    assert reporte.paises == ["Testland", "Sampleland"]


def test_respuesta_fija(csv_doce_paises):
    reporte = ejecutar_pipeline(str(csv_doce_paises), paises_respuesta=["Pais02", "Pais05", "Pais07"], verbose=False)
    assert reporte.respuesta.index.tolist() == ["Pais02", "Pais05", "Pais07"]


def test_respuesta_fija_con_pais_ausente(csv_doce_paises):
    with pytest.raises(PaisNoEncontradoError):
        ejecutar_pipeline(str(csv_doce_paises), paises_respuesta=["Pais00"], verbose=False)


def test_sin_filas_nivel_pais(tmp_path):
    ruta = escribir_csv(tmp_path / "provincias.csv", [
        fila("2020-04-01", "Testland", "TL", "Ohio", 100, 10),
    ])
    reporte = ejecutar_pipeline(str(ruta), verbose=False)
    assert reporte.filtrado.empty
    assert reporte.top10.empty
    assert reporte.respuesta.empty


def test_testeados_en_cero_aborta(tmp_path):
    ruta = escribir_csv(tmp_path / "cero.csv", [
        fila("2020-04-01", "Testland", "TL", "All States", 100, 10),
        fila("2020-04-01", "Nullland", "NL", "All States", 0, 0),
    ])
    with pytest.raises(DivisionPorCeroError) as exc:
        ejecutar_pipeline(str(ruta), verbose=False)
    assert isinstance(exc.value, CovidPipelineError)
    assert exc.value.etapa == "ratio"


def test_idempotente(csv_doce_paises):
    primero = formatear_reporte(ejecutar_pipeline(str(csv_doce_paises), verbose=False))
    segundo = formatear_reporte(ejecutar_pipeline(str(csv_doce_paises), verbose=False))
    assert primero == segundo


def test_imprime_pasos(csv_dos_paises, capsys):
    ejecutar_pipeline(str(csv_dos_paises))
    salida = capsys.readouterr().out
    assert "Filas: 2" in salida
    assert "Sampleland" in salida
