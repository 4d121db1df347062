# analisis_manual.py
# Mismo pipeline que los assets, ejecutado de corrido e imprimiendo cada paso.
import sys

from .configuracion import (
    COLUMNA_NIVEL, COLUMNA_PAIS, COLUMNA_POSITIVOS, COLUMNA_TESTEADOS,
    COLUMNAS_DIARIAS, COLUMNAS_SUMA, LIMITE_RANKING, N_RESPUESTA, PREGUNTA,
    RUTA_CSV_POR_DEFECTO, VALOR_NIVEL_PAIS
)
from .reporte import Reporte, construir_reporte, formatear_reporte
from .transformaciones import (
    agregar_por_pais, calcular_ratios, cargar_csv, filtrar_nivel, rankear,
    seleccionar_columnas, seleccionar_paises, top_por_ratio
)


def ejecutar_pipeline(ruta, paises_respuesta=None, verbose=True) -> Reporte:
    log = print if verbose else (lambda *a, **k: None)

    df = cargar_csv(ruta)
    log(" INFORMACIÓN BÁSICA:")
    log(f"Filas: {len(df)}, Columnas: {len(df.columns)}")

    df_pais = filtrar_nivel(df, COLUMNA_NIVEL, VALOR_NIVEL_PAIS)
    log(f"\n FILAS NIVEL PAÍS ({COLUMNA_NIVEL} == {VALOR_NIVEL_PAIS!r}): {len(df_pais)}")

    df_diario = seleccionar_columnas(df_pais, COLUMNAS_DIARIAS)
    log("\n COLUMNAS DIARIAS:")
    for i, col in enumerate(df_diario.columns, 1):
        log(f"{i:3d}. {col}")
    log(df_diario.head())

    agregado = agregar_por_pais(df_diario, COLUMNA_PAIS, COLUMNAS_SUMA)
    log(f"\n Países únicos: {len(agregado)}")

    top = rankear(agregado, COLUMNA_TESTEADOS, descendente=True, limite=LIMITE_RANKING)
    log(f"\n TOP {LIMITE_RANKING} POR TESTEOS:")
    log(top)

    ratios = calcular_ratios(top, COLUMNA_PAIS, COLUMNA_POSITIVOS, COLUMNA_TESTEADOS)
    log("\n RATIO POSITIVOS / TESTEADOS:")
    log(ratios)

    if paises_respuesta:
        respuesta = seleccionar_paises(ratios, paises_respuesta)
    else:
        respuesta = top_por_ratio(ratios, N_RESPUESTA)

    return construir_reporte(PREGUNTA, respuesta, df, df_pais, df_diario, top, ratios, COLUMNA_PAIS)


if __name__ == "__main__":
    ruta = sys.argv[1] if len(sys.argv) > 1 else RUTA_CSV_POR_DEFECTO
    reporte = ejecutar_pipeline(ruta)
    print("\n" + formatear_reporte(reporte))
