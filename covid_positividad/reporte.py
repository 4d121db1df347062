# reporte.py
from dataclasses import dataclass
from typing import List

import pandas as pd


@dataclass(frozen=True, eq=False)
class Reporte:
    pregunta: str
    respuesta: pd.Series
    original: pd.DataFrame
    filtrado: pd.DataFrame
    diario: pd.DataFrame
    top10: pd.DataFrame
    ratios: pd.Series
    paises: List[str]
    columnas: List[str]


def construir_reporte(
    pregunta: str,
    respuesta: pd.Series,
    original: pd.DataFrame,
    filtrado: pd.DataFrame,
    diario: pd.DataFrame,
    top10: pd.DataFrame,
    ratios: pd.Series,
    columna_pais: str,
) -> Reporte:
    """Empaqueta las tablas intermedias; solo copia, no transforma."""
    paises = diario[columna_pais].dropna().unique().tolist() if columna_pais in diario.columns else []
    return Reporte(
        pregunta=pregunta,
        respuesta=respuesta.copy(),
        original=original.copy(),
        filtrado=filtrado.copy(),
        diario=diario.copy(),
        top10=top10.copy(),
        ratios=ratios.copy(),
        paises=list(paises),
        columnas=list(original.columns),
    )


def _bloque_tabla(titulo: str, df: pd.DataFrame, filas: int) -> List[str]:
    return [
        f"== {titulo} ==",
        f"Dimensiones: {df.shape[0]} filas x {df.shape[1]} columnas",
        f"Columnas: {list(df.columns)}",
        df.head(filas).to_string(),
        "",
    ]


def formatear_reporte(reporte: Reporte, filas: int = 5) -> str:
    lineas = [
        f"PREGUNTA: {reporte.pregunta}",
        "RESPUESTA:",
        reporte.respuesta.to_string() if not reporte.respuesta.empty else "(sin datos)",
        "",
    ]
    lineas += _bloque_tabla("Datos originales", reporte.original, filas)
    lineas += _bloque_tabla("Nivel país", reporte.filtrado, filas)
    lineas += _bloque_tabla("Métricas diarias", reporte.diario, filas)
    lineas += _bloque_tabla("Top 10 por testeos", reporte.top10, len(reporte.top10))
    lineas += [
        f"Países distintos: {len(reporte.paises)}",
        "== Ratio positivos / testeados ==",
        reporte.ratios.to_string() if not reporte.ratios.empty else "(sin datos)",
    ]
    return "\n".join(lineas)
