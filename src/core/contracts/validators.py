"""
JSON Schema Contract Validators

Модуль для валидации JSON данных ликвидации согласно формальным JSON Schema
контрактам. Использует библиотеку jsonschema для проверки соответствия данных
схемам.

Схемы:
- trade_request.json (запрос ликвидатора)
- trade_result.json (результат для диспетчера расчётов)
- liquidated_event.json (payload события ликвидации)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Определяем корень проекта (4 уровня вверх от этого файла)
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'trade_request')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class TradeRequestValidator(ContractValidator):
    """Валидатор для trade_request контракта."""

    def __init__(self):
        super().__init__("trade_request")


class TradeResultValidator(ContractValidator):
    """Валидатор для trade_result контракта."""

    def __init__(self):
        super().__init__("trade_result")


class LiquidatedEventValidator(ContractValidator):
    """Валидатор для liquidated_event контракта."""

    def __init__(self):
        super().__init__("liquidated_event")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_trade_request(data: Dict[str, Any]) -> None:
    """
    Валидация trade_request данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    TradeRequestValidator().validate(data)


def validate_trade_result(data: Dict[str, Any]) -> None:
    """
    Валидация trade_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    TradeResultValidator().validate(data)


def validate_liquidated_event(data: Dict[str, Any]) -> None:
    """
    Валидация liquidated_event данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    LiquidatedEventValidator().validate(data)
