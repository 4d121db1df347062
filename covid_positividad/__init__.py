from dagster import Definitions
from .assets import (
    leer_datos,
    datos_nivel_pais,
    datos_diarios,
    agregado_por_pais,
    top10_testeos,
    ratio_positivos,
    reporte_positividad,
    check_nivel_pais,
    check_columnas_diarias,
    check_unicidad_pais,
    check_orden_top10,
    check_ratios_finitos
)

defs = Definitions(
    assets=[
        leer_datos,
        datos_nivel_pais,
        datos_diarios,
        agregado_por_pais,
        top10_testeos,
        ratio_positivos,
        reporte_positividad
    ],
    asset_checks=[
        check_nivel_pais,
        check_columnas_diarias,
        check_unicidad_pais,
        check_orden_top10,
        check_ratios_finitos
    ]
)
