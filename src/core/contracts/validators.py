"""
JSON Schema Contracts — запрос и отчёт калькулятора дня недели

Схемы лежат в contracts/schema/ в корне проекта (Draft 2020-12):
- weekday_request.json: {"date": "YYYY-MM-DD"}, тот же шаблон, что и в date_input
- weekday_report.json: delta_days, residue ∈ [0, 6], название дня, опорная дата

Схема проверяется на корректность (meta-validation) один раз при первой загрузке.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

# contracts/schema/ относительно корня проекта (src/core/contracts/ → корень)
DEFAULT_SCHEMA_DIR = Path(__file__).resolve().parents[3] / "contracts" / "schema"

WEEKDAY_REQUEST = "weekday_request"
WEEKDAY_REPORT = "weekday_report"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Чтение и кэширование JSON Schema по имени контракта."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or DEFAULT_SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._cache: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема контракта schema_name (без расширения .json).

        Raises:
            FileNotFoundError: Файла схемы нет
            ValueError: Файл не является корректной JSON Schema
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка payload против схемы одного контракта."""

    schema_name: str = ""

    def __init__(self, loader: SchemaLoader | None = None):
        self.schema = (loader or _SCHEMA_LOADER).load_schema(self.schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """Raises: ValidationError — первое найденное нарушение."""
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self._validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """Все нарушения в виде "path: message", отсортированные по пути."""
        messages = []
        for error in sorted(self.iter_errors(data), key=lambda err: list(err.path)):
            location = "/".join(str(part) for part in error.path) or "<root>"
            messages.append(f"{location}: {error.message}")
        return messages


class WeekdayRequestValidator(ContractValidator):
    schema_name = WEEKDAY_REQUEST


class WeekdayReportValidator(ContractValidator):
    schema_name = WEEKDAY_REPORT


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_weekday_report(data: Dict[str, Any]) -> None:
    """Raises: ValidationError если отчёт не соответствует weekday_report."""
    WeekdayReportValidator().validate(data)
