import pytest

ENCABEZADO = (
    "Date,Continent_Name,Two_Letter_Country_Code,Country_Region,Province_State,"
    "positive,active,hospitalized,hospitalizedCurr,recovered,death,total_tested,"
    "daily_tested,daily_positive"
)


def fila(fecha, pais, codigo, provincia, daily_tested, daily_positive, active=1, hosp_curr=0):
    return (
        f"{fecha},Europe,{codigo},{pais},{provincia},"
        f"0,{active},0,{hosp_curr},0,0,0,{daily_tested},{daily_positive}"
    )


def escribir_csv(ruta, filas):
    ruta.write_text("\n".join([ENCABEZADO, *filas]) + "\n", encoding="utf-8")
    return ruta


@pytest.fixture()
def csv_dos_paises(tmp_path):
    """Testland (100 testeos, 10 positivos) y Sampleland (50, 25)."""
    return escribir_csv(tmp_path / "dos_paises.csv", [
        fila("2020-04-01", "Testland", "TL", "All States", 100, 10),
        fila("2020-04-01", "Sampleland", "SL", "All States", 50, 25),
    ])


@pytest.fixture()
def csv_con_provincias(tmp_path):
    return escribir_csv(tmp_path / "con_provincias.csv", [
        fila("2020-04-01", "Testland", "TL", "All States", 100, 10),
        fila("2020-04-01", "Sampleland", "SL", "All States", 50, 25),
        fila("2020-04-01", "Sampleland", "SL", "California", 999999, 999999),
    ])


@pytest.fixture()
def csv_doce_paises(tmp_path):
    filas = []
    for i in range(12):
        # país i: testeos 100*(i+1), positivos i+1 el primer día y 2*(i+1) el segundo
        filas.append(fila("2020-04-01", f"Pais{i:02d}", "XX", "All States", 50 * (i + 1), i + 1))
        filas.append(fila("2020-04-02", f"Pais{i:02d}", "XX", "All States", 50 * (i + 1), 2 * (i + 1)))
    filas.append(fila("2020-04-01", "Pais00", "XX", "Texas", 10 ** 7, 10))
    return escribir_csv(tmp_path / "doce_paises.csv", filas)
