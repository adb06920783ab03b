"""
Разбор блоков плейсхолдеров вида {key} и {key, type, format}.

Содержит поиск парной закрывающей скобки с учётом вложенности и
ограниченное разбиение содержимого блока на части, при котором
последняя часть (format) никогда не дробится дальше.
"""

from __future__ import annotations

from typing import List

OPEN_BRACE = "{"
CLOSE_BRACE = "}"
ARGUMENT_SEPARATOR = ","

# Результат find_closing_bracket, если пары не нашлось
NOT_FOUND = -1


def find_closing_bracket(text: str, from_index: int) -> int:
    """
    Находит индекс парной закрывающей скобки, пропуская вложенные пары.

    Args:
        text: Исходная строка
        from_index: Индекс открывающей скобки '{'

    Returns:
        Индекс парной '}' или NOT_FOUND, если строка закончилась раньше
    """
    depth = 0
    for i in range(from_index + 1, len(text)):
        char = text[i]
        if char == CLOSE_BRACE:
            if depth == 0:
                return i
            depth -= 1
        elif char == OPEN_BRACE:
            depth += 1
    return NOT_FOUND


def split_argument(text: str, separator: str = ARGUMENT_SEPARATOR, limit: int = 3) -> List[str]:
    """
    Аналог str.split(), где limit собирает весь остаток строки в последний элемент.

    Каждая часть обрезается от пробелов по краям. Пустая строка даёт пустой список.

    Args:
        text: Строка для разбиения
        separator: Разделитель частей
        limit: Максимальное количество частей

    Returns:
        Список из не более чем limit частей
    """
    parts: List[str] = []
    remainder = text
    while remainder:
        if len(parts) == limit - 1:
            parts.append(remainder.strip())
            break
        index = remainder.find(separator)
        if index == -1:
            parts.append(remainder.strip())
            break
        parts.append(remainder[:index].strip())
        remainder = remainder[index + len(separator):].strip()
    return parts


def split_formatted_argument(block: str) -> List[str]:
    """
    Разбивает целый блок `{key, type, format}` на эти три части.

    Вложенный синтаксис внутри format остаётся нетронутым.

    Returns:
        Список из key, type и format (в этом порядке), если они присутствуют в блоке
    """
    return split_argument(block[1:-1], ARGUMENT_SEPARATOR, 3)


__all__ = [
    "OPEN_BRACE",
    "CLOSE_BRACE",
    "ARGUMENT_SEPARATOR",
    "NOT_FOUND",
    "find_closing_bracket",
    "split_argument",
    "split_formatted_argument",
]
