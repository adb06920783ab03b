"""
Узлы результата обработки сообщения.

Определяет неизменяемые узлы, описывающие происхождение каждой части
результата: литеральный текст из исходного сообщения или значение,
полученное из данных плейсхолдера. Нестроковые рендереры работают
непосредственно с этими узлами, строковый рендерер использует extract_values.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

# Узел получен из исходного текста сообщения
SOURCE_MESSAGE = "message"

# Узел получен из данных плейсхолдера
SOURCE_PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class ResultNode(ABC):
    """Базовый класс для всех узлов результата."""

    @property
    @abstractmethod
    def source(self) -> str:
        """Происхождение узла: SOURCE_MESSAGE или SOURCE_PLACEHOLDER."""
        pass


@dataclass(frozen=True)
class MessageNode(ResultNode):
    """
    Литеральный текст из исходного сообщения.

    Не затрагивается подстановкой и выводится как есть.
    """
    value: str

    @property
    def source(self) -> str:
        return SOURCE_MESSAGE


@dataclass(frozen=True)
class PlaceholderNode(ResultNode):
    """
    Результат разрешения одного блока плейсхолдера.

    value может быть строкой, произвольным значением обработчика типа
    или вложенным списком узлов (если обработчик вызывал рекурсивную обработку).
    """
    key: str
    type: Optional[str]
    value: Any

    @property
    def source(self) -> str:
        return SOURCE_PLACEHOLDER


# Алиас для упорядоченного списка узлов
ResultNodes = List[ResultNode]


def decorate_message(text: str) -> MessageNode:
    """Оборачивает часть исходного сообщения в описывающий её узел."""
    return MessageNode(value=text)


def decorate_placeholder(key: str, type: Optional[str], value: Any) -> PlaceholderNode:
    """Оборачивает результат плейсхолдера в узел с информацией о его происхождении."""
    return PlaceholderNode(key=key, type=type, value=value)


def _is_node_sequence(value: Any) -> bool:
    # Строки тоже последовательности, поэтому проверяем явно список/кортеж
    return isinstance(value, (list, tuple)) and all(isinstance(v, ResultNode) for v in value)


def extract_values(nodes: Sequence[ResultNode]) -> List[Any]:
    """
    Извлекает только значения из вложенного дерева узлов.

    Вложенные списки узлов раскрываются рекурсивно, порядок сохраняется.

    Args:
        nodes: Узлы, полученные от MessageProcessor.process

    Returns:
        Плоский список листовых значений
    """
    result: List[Any] = []
    for node in nodes:
        if _is_node_sequence(node.value):
            result.extend(extract_values(node.value))
        else:
            result.append(node.value)
    return result


def to_dict(node: ResultNode) -> Dict[str, Any]:
    """
    Представление узла в виде словаря (для JSON и внешних рендереров).

    Вложенные списки узлов преобразуются рекурсивно.
    """
    if isinstance(node, PlaceholderNode):
        value = nodes_to_dicts(node.value) if _is_node_sequence(node.value) else node.value
        return {
            "source": node.source,
            "key": node.key,
            "type": node.type,
            "value": value,
        }
    return {"source": node.source, "value": node.value}


def nodes_to_dicts(nodes: Sequence[ResultNode]) -> List[Dict[str, Any]]:
    return [to_dict(node) for node in nodes]


__all__ = [
    "SOURCE_MESSAGE",
    "SOURCE_PLACEHOLDER",
    "ResultNode",
    "MessageNode",
    "PlaceholderNode",
    "ResultNodes",
    "decorate_message",
    "decorate_placeholder",
    "extract_values",
    "to_dict",
    "nodes_to_dicts",
]
