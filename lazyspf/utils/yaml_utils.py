"""Utilities for handling YAML parsing quirks in node identifiers."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_node_id(node: Any) -> str:
    """Return a predictable string form of a node identifier parsed from YAML.

    YAML 1.1 turns bare ``yes``/``no``/``on``/``off``/``true``/``false`` into
    booleans and bare digits into integers. Node identifiers read from files
    are always strings, so ``True`` becomes ``"True"`` and ``7`` becomes ``"7"``.
    """
    return str(node)


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Normalize dictionary keys from YAML parsing to consistent string keys.

    Args:
        data: Dictionary that may contain boolean or numeric keys from YAML parsing.

    Returns:
        Dictionary with all keys converted to strings.

    Examples:
        >>> normalize_yaml_dict_keys({True: 1, 2: 3, "c": 4})
        {'True': 1, '2': 3, 'c': 4}
    """
    return {normalize_node_id(key): value for key, value in data.items()}
