# transformaciones.py
import csv
import os

import pandas as pd
from dagster import get_dagster_logger

from .errores import (
    ArchivoIlegibleError,
    ArchivoNoEncontradoError,
    ColumnaNoEncontradaError,
    DivisionPorCeroError,
    ParseError,
    PaisNoEncontradoError,
)

logger = get_dagster_logger()


def _validar_conteo_campos(ruta: str, separador: str = ",") -> None:
    with open(ruta, newline="", encoding="utf-8") as f:
        lector = csv.reader(f, delimiter=separador)
        encabezado = next(lector, None)
        if not encabezado:
            raise ParseError(f"{ruta} está vacío o no tiene encabezado")
        for fila in lector:
            if not fila:
                continue
            if len(fila) != len(encabezado):
                raise ParseError(
                    f"Línea {lector.line_num}: {len(fila)} campos, "
                    f"el encabezado tiene {len(encabezado)}"
                )


def cargar_csv(ruta: str, separador: str = ",") -> pd.DataFrame:
    if not os.path.exists(ruta):
        raise ArchivoNoEncontradoError(f"No existe el archivo {ruta}")
    try:
        _validar_conteo_campos(ruta, separador)
        # solo el campo vacío es faltante: "NA" es el código de Namibia
        df = pd.read_csv(ruta, sep=separador, encoding="utf-8", keep_default_na=False, na_values=[""])
    except UnicodeDecodeError as e:
        raise ParseError(f"{ruta} no es UTF-8 válido: {e}") from e
    except (IsADirectoryError, PermissionError) as e:
        raise ArchivoIlegibleError(f"No se puede leer {ruta}: {e}") from e
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise ParseError(f"No se pudo leer {ruta}: {e}") from e
    if "Date" in df.columns:
        df["Date"] = pd.to_datetime(df["Date"], errors="coerce")
    logger.info(f"Cargadas {len(df)} filas y {len(df.columns)} columnas desde {ruta}")
    return df


def filtrar_nivel(df: pd.DataFrame, columna: str, valor: str) -> pd.DataFrame:
    if columna not in df.columns:
        raise ColumnaNoEncontradaError(f"Columna {columna!r} ausente", etapa="filtro_nivel")
    df_filtrado = df[df[columna] == valor].copy()
    if df_filtrado.empty:
        logger.warning(f"Ninguna fila con {columna} == {valor!r}")
    else:
        logger.info(f"{len(df_filtrado)} de {len(df)} filas con {columna} == {valor!r}")
    return df_filtrado


def seleccionar_columnas(df: pd.DataFrame, columnas) -> pd.DataFrame:
    faltantes = [c for c in columnas if c not in df.columns]
    if faltantes:
        raise ColumnaNoEncontradaError(
            f"Faltan columnas: {faltantes}. Disponibles: {list(df.columns)}"
        )
    return df[list(columnas)].copy()


def agregar_por_pais(df: pd.DataFrame, columna_grupo: str, columnas_suma) -> pd.DataFrame:
    faltantes = [c for c in [columna_grupo, *columnas_suma] if c not in df.columns]
    if faltantes:
        raise ColumnaNoEncontradaError(f"Faltan columnas: {faltantes}", etapa="agregacion")
    agregado = (
        df.groupby(columna_grupo, sort=False)[list(columnas_suma)]
        .sum()
        .astype(float)
        .reset_index()
    )
    logger.info(f"{len(agregado)} grupos por {columna_grupo}")
    return agregado


def rankear(df: pd.DataFrame, columna: str, descendente: bool = True, limite: int = 10) -> pd.DataFrame:
    if columna not in df.columns:
        raise ColumnaNoEncontradaError(f"Columna {columna!r} ausente", etapa="ranking")
    ordenado = df.sort_values(columna, ascending=not descendente, kind="stable")
    return ordenado.head(limite).reset_index(drop=True)


def calcular_ratios(
    top: pd.DataFrame,
    columna_pais: str,
    columna_positivos: str,
    columna_testeados: str,
) -> pd.Series:
    # testeados en cero o faltantes: error, nunca infinito
    faltantes = [c for c in (columna_pais, columna_positivos, columna_testeados) if c not in top.columns]
    if faltantes:
        raise ColumnaNoEncontradaError(f"Faltan columnas: {faltantes}", etapa="ratio")
    sin_testeos = top[(top[columna_testeados] == 0) | top[columna_testeados].isna()]
    if not sin_testeos.empty:
        raise DivisionPorCeroError(
            f"Testeados en cero para: {sin_testeos[columna_pais].tolist()}"
        )
    ratios = top[columna_positivos] / top[columna_testeados]
    ratios.index = top[columna_pais].tolist()
    ratios.index.name = columna_pais
    return ratios.rename("ratio")


def top_por_ratio(ratios: pd.Series, n: int = 3) -> pd.Series:
    return ratios.sort_values(ascending=False, kind="stable").head(n)


def seleccionar_paises(ratios: pd.Series, paises) -> pd.Series:
    # respuesta fija, en el orden dado
    ausentes = [p for p in paises if p not in ratios.index]
    if ausentes:
        raise PaisNoEncontradoError(f"Países fuera del ranking: {ausentes}")
    return ratios.loc[list(paises)]
