# script para verificar que un CSV tiene la estructura esperada

import sys

import pandas as pd

from .configuracion import COLUMNAS_ESPERADAS, RUTA_CSV_POR_DEFECTO


def inspeccionar_dataset(ruta, filas=5):
    """Inspecciona el encabezado del CSV y devuelve las columnas esperadas que faltan"""

    print("=== INSPECCIONANDO DATASET COVID-19 ===")
    print(f"Archivo: {ruta}")

    # Leer solo las primeras filas para inspeccionar
    df = pd.read_csv(ruta, nrows=filas)

    print(f"\n📊 INFORMACIÓN BÁSICA:")
    print(f"   - Filas de muestra: {len(df)}")
    print(f"   - Total de columnas: {len(df.columns)}")

    print(f"\n📋 COLUMNAS DISPONIBLES:")
    for i, col in enumerate(df.columns):
        marca = "✅" if col in COLUMNAS_ESPERADAS else "➕"
        print(f"   {i+1:2d}. {col} {marca}")

    faltantes = [c for c in COLUMNAS_ESPERADAS if c not in df.columns]
    if faltantes:
        print(f"\n❌ COLUMNAS FALTANTES: {faltantes}")
    elif list(df.columns) != COLUMNAS_ESPERADAS:
        print("\n⚠️ Columnas completas pero en otro orden")
    else:
        print("\n✅ Encabezado idéntico al esperado")

    print(f"\n🔍 DATOS DE MUESTRA:")
    print(df.head(filas))

    return faltantes

if __name__ == "__main__":
    inspeccionar_dataset(sys.argv[1] if len(sys.argv) > 1 else RUTA_CSV_POR_DEFECTO)
