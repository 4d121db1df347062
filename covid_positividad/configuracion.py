# configuracion.py
import os
from typing import List, Optional

from dagster import Config

RUTA_CSV_POR_DEFECTO = os.getenv("COVID_CSV_PATH", os.path.join(os.getcwd(), "covid_data.csv"))

COLUMNAS_ESPERADAS = [
    "Date", "Continent_Name", "Two_Letter_Country_Code", "Country_Region",
    "Province_State", "positive", "active", "hospitalized", "hospitalizedCurr",
    "recovered", "death", "total_tested", "daily_tested", "daily_positive",
]

COLUMNA_NIVEL = "Province_State"
VALOR_NIVEL_PAIS = "All States"

COLUMNAS_DIARIAS = [
    "Date", "Country_Region", "active", "hospitalizedCurr", "daily_tested", "daily_positive",
]

COLUMNA_PAIS = "Country_Region"
COLUMNAS_SUMA = ["daily_tested", "daily_positive", "active", "hospitalizedCurr"]
COLUMNA_TESTEADOS = "daily_tested"
COLUMNA_POSITIVOS = "daily_positive"

LIMITE_RANKING = 10
N_RESPUESTA = 3

PREGUNTA = (
    "Entre los 10 países con más testeos diarios acumulados, "
    "¿cuáles son los 3 con mayor ratio de positivos sobre testeados?"
)


class ConfigCarga(Config):
    ruta_csv: str = RUTA_CSV_POR_DEFECTO


class ConfigRespuesta(Config):
    n_respuesta: int = N_RESPUESTA
    # lista fija de países; None = ordenar por ratio y cortar
    paises_respuesta: Optional[List[str]] = None
