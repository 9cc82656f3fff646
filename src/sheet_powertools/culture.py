"""Culture data injected into readers, writers and validators.

A ``Culture`` pins everything locale-dependent (month names, date patterns,
number separators and user-facing messages) so that nothing is read from the
process locale.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .config import ConfigError, WorkbookSettings


class Messages(BaseModel):
    """``str.format`` templates for user-facing text."""

    model_config = ConfigDict(frozen=True)

    required: str
    wrong_type: str
    max_length: str
    exact_length: str
    invalid_email: str
    invalid_month: str
    headers_not_found: str
    sheet_not_found_by_name: str
    sheet_not_found_by_index: str
    named_range_not_found: str


class TypeNames(BaseModel):
    """Labels used in the "expected <type>" message."""

    model_config = ConfigDict(frozen=True)

    integer: str
    short: str
    long: str
    number: str
    datetime: str
    time: str


class Culture(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    month_names: tuple[str, ...] = Field(min_length=12, max_length=12)
    short_date_format: str
    date_input_formats: tuple[str, ...] = ()
    short_date_number_format: str
    long_date_number_format: str
    decimal_separator: str = "."
    group_separator: str = ","
    messages: Messages
    type_names: TypeNames

    def month_number(self, text: str) -> int | None:
        """1-based position of ``text`` in ``month_names``, ignoring case."""
        wanted = text.strip().casefold()
        for index, month in enumerate(self.month_names, start=1):
            if month.casefold() == wanted:
                return index
        return None


ES_AR = Culture(
    name="es-AR",
    month_names=(
        "enero", "febrero", "marzo", "abril", "mayo", "junio",
        "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
    ),
    short_date_format="%d/%m/%Y",
    date_input_formats=(
        "%d/%m/%Y %H:%M:%S",
        "%d/%m/%Y %H:%M",
        "%d/%m/%Y",
        "%d-%m-%Y",
        "%d/%m/%y",
    ),
    short_date_number_format="dd/mm/yyyy",
    long_date_number_format='dddd, d "de" mmmm "de" yyyy',
    decimal_separator=",",
    group_separator=".",
    messages=Messages(
        required="El campo {field} es requerido.",
        wrong_type="El campo {field} tiene un tipo de dato no válido, se esperaba {type_name}.",
        max_length="El campo {field} no puede superar los {max_length} caracteres.",
        exact_length="El campo {field} debe tener {length} caracteres.",
        invalid_email="El campo {field} no es un correo electrónico válido.",
        invalid_month="{field} no es un mes válido.",
        headers_not_found="[{sheet}] Encabezados no encontrados: {headers}.",
        sheet_not_found_by_name="La hoja '{sheet}' no existe.",
        sheet_not_found_by_index="La hoja {index} no existe.",
        named_range_not_found="El nombre administrado '{name}' no existe.",
    ),
    type_names=TypeNames(
        integer="Número entero",
        short="Número entero corto",
        long="Número entero largo",
        number="Número",
        datetime="Fecha/Hora",
        time="Hora",
    ),
)

EN_US = Culture(
    name="en-US",
    month_names=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    short_date_format="%m/%d/%Y",
    date_input_formats=(
        "%m/%d/%Y %I:%M:%S %p",
        "%m/%d/%Y %H:%M:%S",
        "%m/%d/%Y %H:%M",
        "%m/%d/%Y",
        "%m-%d-%Y",
        "%m/%d/%y",
    ),
    short_date_number_format="m/d/yyyy",
    long_date_number_format="dddd, mmmm d, yyyy",
    messages=Messages(
        required="{field} is required.",
        wrong_type="{field} has an invalid type, expected {type_name}.",
        max_length="{field} must not exceed {max_length} characters.",
        exact_length="{field} must be exactly {length} characters long.",
        invalid_email="{field} is not a valid email address.",
        invalid_month="{field} is not a valid month.",
        headers_not_found="[{sheet}] Headers not found: {headers}.",
        sheet_not_found_by_name="The sheet '{sheet}' does not exist.",
        sheet_not_found_by_index="The sheet {index} does not exist.",
        named_range_not_found="The named range '{name}' does not exist.",
    ),
    type_names=TypeNames(
        integer="Integer",
        short="Short integer",
        long="Long integer",
        number="Number",
        datetime="Date/Time",
        time="Time",
    ),
)

_CULTURES: dict[str, Culture] = {ES_AR.name: ES_AR, EN_US.name: EN_US}


def register_culture(culture: Culture) -> None:
    _CULTURES[culture.name] = culture


def get_culture(name: str | None = None) -> Culture:
    """Return the culture called ``name``, or the configured default."""
    if name is None:
        name = WorkbookSettings.load().culture
    try:
        return _CULTURES[name]
    except KeyError:
        raise ConfigError(
            f"Unknown culture {name!r}. Registered: {sorted(_CULTURES)}"
        ) from None


def resolve_culture(culture: Culture | str | None) -> Culture:
    if isinstance(culture, Culture):
        return culture
    return get_culture(culture)
