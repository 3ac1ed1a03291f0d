"""Field aliases for the raw records handed over by the data services.

Each data source (spreadsheet exports, the HR backend, the leave registry)
names the same logical field differently. Every lookup goes through
``first_value`` with one of the ordered alias tuples below, so the accepted
spellings live in a single place.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Sequence


ABSENCE_TYPE = ("TIPO", "tipo", "type")
ABSENCE_REASON = ("MOTIVO", "motivo", "reason")
ABSENCE_DATE = ("FECHA", "fecha", "data")
ABSENCE_START = ("fecha_inicio", "fechaInicio", "FECHA_INICIO")
ABSENCE_END = ("fecha_fin", "fechaFin", "FECHA_FIN")

LEAVE_RANGE = ("FECHA", "Fecha")
LEAVE_START = (
    "FECHA_INICIO",
    "fecha_inicio",
    "fechaInicio",
    "Fecha baja",
    "Fecha Baja",
    "fecha_baja",
    "fechaBaja",
    "FECHA BAJA",
    "fechaBajaInicio",
)
LEAVE_ACTUAL_END = (
    "FECHA_FIN",
    "fecha_fin",
    "fechaFin",
    "Fecha alta",
    "Fecha Alta",
    "fecha_alta",
    "fechaAlta",
    "FECHA ALTA",
    "fechaBajaFin",
)
LEAVE_PREDICTED_END = (
    "Fecha de alta prevista SPS",
    "Fecha de alta prevista",
    "Fecha alta prevista",
    "fecha_alta_prevista",
    "fechaAltaPrevista",
    "fecha_alta_prevista_sps",
    "fechaAltaPrevistaSps",
)
LEAVE_SITUATION = ("Situación", "Situacion", "situacion", "estado")
LEAVE_MOTIVE = ("motivo", "Motivo")
LEAVE_EMPLOYEE_CODE = ("Codigo_Empleado", "codigo_empleado", "codigoEmpleado", "Código Empleado", "codigo")
LEAVE_EMPLOYEE_NAME = ("Trabajador", "trabajador", "Nombre empleado", "Nombre Empleado")

ROSTER_MONTH = ("LUNA", "luna", "MES", "mes")
ROSTER_EMAIL = ("EMAIL", "email")
ROSTER_CODE = ("CODIGO", "codigo")
ROSTER_NAME = ("NOMBRE", "nombre")

SCHEDULE_CENTER = ("centroNombre", "centro_nombre")
SCHEDULE_GROUP = ("grupoNombre", "grupo_nombre")
SCHEDULE_DAYS = ("days", "dias")

EVENT_DATE = ("FECHA", "fecha", "data")
EVENT_TIME = ("HORA", "hora")
EVENT_TYPE = ("TIPO", "tipo")
EVENT_DURATION = ("DURACION", "duracion")

EMPLOYEE_CODE = ("CODIGO", "codigo")
EMPLOYEE_NAME = ("NOMBRE / APELLIDOS", "NOMBRE", "nombre")
EMPLOYEE_EMAIL = ("CORREO ELECTRONICO", "EMAIL", "email")
EMPLOYEE_CENTER = ("CENTRO TRABAJO", "centroTrabajo", "CENTRO", "centro")
EMPLOYEE_GROUP = ("GRUPO", "grupo")


def roster_day_keys(day_number: int) -> tuple[str, ...]:
    return (str(day_number), f"ZI_{day_number}", f"zi_{day_number}")


def is_blank(value: object) -> bool:
    return value is None or str(value).strip() == ""


def first_value_with_source(record: object, keys: Sequence[str]) -> tuple[Any, str | None]:
    """Return the first non-blank value among ``keys`` and the key it came from."""
    if not isinstance(record, Mapping):
        return None, None
    for key in keys:
        value = record.get(key)
        if not is_blank(value):
            return value, key
    return None, None


def first_value(record: object, keys: Sequence[str]) -> Any:
    return first_value_with_source(record, keys)[0]


def first_text(record: object, keys: Sequence[str], default: str = "") -> str:
    value = first_value(record, keys)
    if value is None:
        return default
    return str(value).strip()
