# errores.py


class CovidPipelineError(Exception):
    """Error base del pipeline; ``etapa`` identifica la etapa que falló."""

    etapa = "pipeline"

    def __init__(self, mensaje, etapa=None):
        super().__init__(mensaje)
        if etapa is not None:
            self.etapa = etapa

    def __str__(self):
        return f"[{self.etapa}] {self.args[0]}"


class ArchivoNoEncontradoError(CovidPipelineError, FileNotFoundError):
    etapa = "carga"


class ParseError(CovidPipelineError, ValueError):
    etapa = "carga"


class ColumnaNoEncontradaError(CovidPipelineError, KeyError):
    etapa = "seleccion_columnas"


class DivisionPorCeroError(CovidPipelineError, ZeroDivisionError):
    etapa = "ratio"


class PaisNoEncontradoError(CovidPipelineError, KeyError):
    etapa = "ratio"


class ArchivoIlegibleError(CovidPipelineError, OSError):
    etapa = "carga"
