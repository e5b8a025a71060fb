"""
Contract Validators — JSON Schema контракты отправлений и отчётов

Схемы поставляются внутри пакета (src/core/contracts/schema/) и читаются
через importlib.resources, поэтому работают и после обычной установки.
Схема загружается и проходит meta-validation при первом обращении.

Контракты:
- mail_item — JSON форма одного отправления (model_dump(mode="json"))
- mailbox_report — JSON форма сводного отчёта (экспорт Mailbox)
"""

import functools
import json
from importlib import resources
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


SCHEMA_PACKAGE = "src.core.contracts"
SCHEMA_SUBDIR = "schema"

MAIL_ITEM_SCHEMA = "mail_item"
MAILBOX_REPORT_SCHEMA = "mailbox_report"


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@functools.lru_cache(maxsize=8)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Чтение JSON Schema из ресурсов пакета (с кэшированием).

    Args:
        schema_name: Имя схемы без расширения (например, 'mail_item')

    Returns:
        Схема как dict

    Raises:
        FileNotFoundError: Если схема отсутствует в пакете
        ValueError: Если файл не является валидной JSON Schema
    """
    resource = resources.files(SCHEMA_PACKAGE).joinpath(SCHEMA_SUBDIR).joinpath(f"{schema_name}.json")
    if not resource.is_file():
        raise FileNotFoundError(f"Schema not found in package: {schema_name}.json")

    schema = json.loads(resource.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

    return schema


@functools.lru_cache(maxsize=8)
def _validator_for(schema_name: str) -> Draft202012Validator:
    return Draft202012Validator(load_schema(schema_name))


# =============================================================================
# CONTRACT
# =============================================================================


class Contract:
    """Именованный JSON контракт поверх Draft 2020-12 валидатора."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name

    @property
    def schema(self) -> Dict[str, Any]:
        return load_schema(self.schema_name)

    def validate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Проверка данных; при успехе возвращает их без изменений.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        _validator_for(self.schema_name).validate(data)
        return data

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка без exception"""
        return _validator_for(self.schema_name).is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все нарушения схемы (пустой итератор для валидных данных)"""
        return _validator_for(self.schema_name).iter_errors(data)


MAIL_ITEM_CONTRACT = Contract(MAIL_ITEM_SCHEMA)
MAILBOX_REPORT_CONTRACT = Contract(MAILBOX_REPORT_SCHEMA)


def validate_mail_item(data: Dict[str, Any]) -> Dict[str, Any]:
    """Валидация JSON формы отправления (ValidationError при нарушении)"""
    return MAIL_ITEM_CONTRACT.validate(data)


def validate_mailbox_report(data: Dict[str, Any]) -> Dict[str, Any]:
    """Валидация JSON формы отчёта (ValidationError при нарушении)"""
    return MAILBOX_REPORT_CONTRACT.validate(data)
