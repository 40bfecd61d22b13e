# Argstream CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion for typed queries on the `Cli` engine.

Every value pulled from the command line is text. The typed queries
(`check_option`, `check_positional`, ...) run it through `coerce_value`, and a
`ValueError` or `TypeError` raised here becomes a `BadType` error at the query site.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Convert a string to an Enum member by name or value.
- coerce_value: General-purpose coercion to a target type or callable.
"""
import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

TRUTHY = {"true", "t", "1", "yes", "y", "on"}
FALSY = {"false", "f", "0", "no", "n", "off"}


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts truthy and falsy spellings such as 'true', 'yes', '0', 'off'.
    Anything else is rejected rather than guessed.

    Raises:
        ValueError: If the text is not a recognized boolean spelling.
    """
    lowered = value.strip().lower()
    if lowered in TRUTHY:
        return True
    if lowered in FALSY:
        return False
    raise ValueError("provided string was not `true` or `false`")


def coerce_enum(value: str, enum_type: EnumMeta) -> Any:
    """
    Convert a string to an Enum member.

    Tries the member name first, then the member value coerced to the type of
    the enum's values.

    Raises:
        ValueError: If the value cannot be resolved to a valid member.
    """
    try:
        return enum_type[value]  # type: ignore[index]
    except KeyError:
        pass

    base_type = type(next(iter(enum_type)).value)
    try:
        return enum_type(base_type(value))
    except (ValueError, TypeError):
        values = [str(member.value) for member in enum_type]  # type: ignore[var-annotated]
        raise ValueError(f"'{value}' should be one of {{{', '.join(values)}}}") from None


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Convert a string to the given target type.

    Handles Union, Literal, Enum, bool and datetime specially; any other type or
    callable is applied to the string directly.

    Args:
        value (str): The input text.
        target_type (Any): A type, typing construct, or `str -> T` callable.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If conversion fails or the value is invalid.
    """
    origin = get_origin(target_type)
    args = get_args(target_type)

    if target_type is str:
        return value

    if origin is Literal:
        for arg in args:
            if str(arg) == value:
                return arg
        raise ValueError(f"'{value}' should be one of {{{', '.join(map(str, args))}}}")

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            if arg is type(None):
                continue
            try:
                return coerce_value(value, arg)
            except (ValueError, TypeError):
                continue
        raise ValueError(f"'{value}' could not be coerced to any of {args}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"'{value}' could not be parsed as a datetime") from error

    try:
        return target_type(value)
    except TypeError as error:
        raise ValueError(str(error)) from error
