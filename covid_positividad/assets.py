# assets.py
import numpy as np
import pandas as pd
from dagster import (
    asset, AssetCheckResult, asset_check, AssetExecutionContext,
    AssetCheckExecutionContext, AssetCheckSeverity, Failure, MetadataValue
)

from .configuracion import (
    COLUMNA_NIVEL, COLUMNA_PAIS, COLUMNA_POSITIVOS, COLUMNA_TESTEADOS,
    COLUMNAS_DIARIAS, COLUMNAS_SUMA, LIMITE_RANKING, PREGUNTA, VALOR_NIVEL_PAIS,
    ConfigCarga, ConfigRespuesta
)
from .errores import CovidPipelineError
from .reporte import Reporte, construir_reporte, formatear_reporte
from .transformaciones import (
    agregar_por_pais, calcular_ratios, cargar_csv, filtrar_nivel, rankear,
    seleccionar_columnas, seleccionar_paises, top_por_ratio
)


def _como_failure(context, error: CovidPipelineError) -> Failure:
    context.log.error(str(error))
    return Failure(
        description=str(error),
        metadata={"etapa": MetadataValue.text(error.etapa)}
    )


@asset
def leer_datos(context: AssetExecutionContext, config: ConfigCarga) -> pd.DataFrame:
    try:
        df = cargar_csv(config.ruta_csv)
    except CovidPipelineError as e:
        raise _como_failure(context, e) from e
    context.log.info(f"Datos leídos desde {config.ruta_csv}")
    context.add_output_metadata({
        "filas": MetadataValue.int(len(df)),
        "columnas": MetadataValue.json(list(df.columns))
    })
    return df


@asset
def datos_nivel_pais(context: AssetExecutionContext, leer_datos: pd.DataFrame) -> pd.DataFrame:
    try:
        df = filtrar_nivel(leer_datos, COLUMNA_NIVEL, VALOR_NIVEL_PAIS)
    except CovidPipelineError as e:
        raise _como_failure(context, e) from e
    if df.empty:
        context.log.warning(f"Sin filas con {COLUMNA_NIVEL} == {VALOR_NIVEL_PAIS!r}")
    context.add_output_metadata({"filas": MetadataValue.int(len(df))})
    return df


@asset
def datos_diarios(context: AssetExecutionContext, datos_nivel_pais: pd.DataFrame) -> pd.DataFrame:
    try:
        df = seleccionar_columnas(datos_nivel_pais, COLUMNAS_DIARIAS)
    except CovidPipelineError as e:
        raise _como_failure(context, e) from e
    context.add_output_metadata({
        "filas": MetadataValue.int(len(df)),
        "columnas_finales": MetadataValue.json(list(df.columns))
    })
    return df


@asset
def agregado_por_pais(context: AssetExecutionContext, datos_diarios: pd.DataFrame) -> pd.DataFrame:
    try:
        df = agregar_por_pais(datos_diarios, COLUMNA_PAIS, COLUMNAS_SUMA)
    except CovidPipelineError as e:
        raise _como_failure(context, e) from e
    context.add_output_metadata({"paises": MetadataValue.int(len(df))})
    return df


@asset
def top10_testeos(context: AssetExecutionContext, agregado_por_pais: pd.DataFrame) -> pd.DataFrame:
    try:
        df = rankear(agregado_por_pais, COLUMNA_TESTEADOS, descendente=True, limite=LIMITE_RANKING)
    except CovidPipelineError as e:
        raise _como_failure(context, e) from e
    context.add_output_metadata({
        "paises_top": MetadataValue.json(df[COLUMNA_PAIS].tolist())
    })
    return df


@asset
def ratio_positivos(context: AssetExecutionContext, top10_testeos: pd.DataFrame) -> pd.Series:
    try:
        ratios = calcular_ratios(top10_testeos, COLUMNA_PAIS, COLUMNA_POSITIVOS, COLUMNA_TESTEADOS)
    except CovidPipelineError as e:
        raise _como_failure(context, e) from e
    context.add_output_metadata({
        "ratios": MetadataValue.json({p: float(r) for p, r in ratios.items()})
    })
    return ratios


@asset
def reporte_positividad(context: AssetExecutionContext, config: ConfigRespuesta,
                        leer_datos: pd.DataFrame, datos_nivel_pais: pd.DataFrame,
                        datos_diarios: pd.DataFrame, top10_testeos: pd.DataFrame,
                        ratio_positivos: pd.Series) -> Reporte:
    try:
        if config.paises_respuesta:
            context.log.info(f"Respuesta fija: {config.paises_respuesta}")
            respuesta = seleccionar_paises(ratio_positivos, config.paises_respuesta)
        else:
            respuesta = top_por_ratio(ratio_positivos, config.n_respuesta)
    except CovidPipelineError as e:
        raise _como_failure(context, e) from e
    reporte = construir_reporte(
        PREGUNTA, respuesta, leer_datos, datos_nivel_pais, datos_diarios,
        top10_testeos, ratio_positivos, COLUMNA_PAIS
    )
    context.log.info(f"Respuesta: {respuesta.index.tolist()}")
    context.add_output_metadata({
        "respuesta": MetadataValue.json({p: float(r) for p, r in respuesta.items()}),
        "reporte": MetadataValue.text(formatear_reporte(reporte))
    })
    return reporte

# ------------------ CHECKS ------------------

@asset_check(asset=datos_nivel_pais, name="check_nivel_pais")
def check_nivel_pais(context: AssetCheckExecutionContext, datos_nivel_pais: pd.DataFrame) -> AssetCheckResult:
    otros = int((datos_nivel_pais[COLUMNA_NIVEL] != VALOR_NIVEL_PAIS).sum())
    passed = otros == 0
    return AssetCheckResult(
        passed=passed,
        description="Solo filas a nivel país" if passed else f"{otros} filas subnacionales",
        severity=AssetCheckSeverity.ERROR,
        metadata={"filas_subnacionales": MetadataValue.int(otros)}
    )


@asset_check(asset=datos_diarios, name="check_columnas_diarias")
def check_columnas_diarias(context: AssetCheckExecutionContext, datos_diarios: pd.DataFrame) -> AssetCheckResult:
    columnas = list(datos_diarios.columns)
    passed = columnas == COLUMNAS_DIARIAS
    return AssetCheckResult(
        passed=passed,
        description="Columnas diarias en orden" if passed else f"Columnas inesperadas: {columnas}",
        severity=AssetCheckSeverity.ERROR,
        metadata={"columnas_presentes": MetadataValue.json(columnas)}
    )


@asset_check(asset=agregado_por_pais, name="check_unicidad_pais")
def check_unicidad_pais(context: AssetCheckExecutionContext, agregado_por_pais: pd.DataFrame) -> AssetCheckResult:
    dup = int(agregado_por_pais.duplicated(subset=[COLUMNA_PAIS]).sum())
    passed = dup == 0
    return AssetCheckResult(
        passed=passed,
        description="Un agregado por país" if passed else f"{dup} países duplicados",
        severity=AssetCheckSeverity.ERROR,
        metadata={"duplicados": MetadataValue.int(dup)}
    )


@asset_check(asset=top10_testeos, name="check_orden_top10")
def check_orden_top10(context: AssetCheckExecutionContext, top10_testeos: pd.DataFrame) -> AssetCheckResult:
    ordenado = top10_testeos[COLUMNA_TESTEADOS].is_monotonic_decreasing
    passed = ordenado and len(top10_testeos) <= LIMITE_RANKING
    return AssetCheckResult(
        passed=passed,
        description="Top ordenado por testeos" if passed else "Top desordenado o demasiado largo",
        severity=AssetCheckSeverity.ERROR,
        metadata={"filas": MetadataValue.int(len(top10_testeos))}
    )


@asset_check(asset=ratio_positivos, name="check_ratios_finitos")
def check_ratios_finitos(context: AssetCheckExecutionContext, ratio_positivos: pd.Series) -> AssetCheckResult:
    valores = ratio_positivos.to_numpy(dtype=float)
    malos = int((~np.isfinite(valores) | (valores < 0)).sum())
    passed = malos == 0
    return AssetCheckResult(
        passed=passed,
        description="Ratios finitos y no negativos" if passed else f"{malos} ratios inválidos",
        severity=AssetCheckSeverity.WARN,
        metadata={"ratios_invalidos": MetadataValue.int(malos)}
    )
