from __future__ import annotations
from typing import Any, Mapping


def get_energy_section(data: Mapping[str, Any], key: str = "energies") -> Mapping[str, Any]:
    """
    Return the mapping that holds the energy coefficients.

    Parameters
    ----------
    data : Mapping[str, Any]
        Parsed YAML tree (top-level dict).
    key : str, optional
        Name of the section, by default ``"energies"``.

    Returns
    -------
    Mapping[str, Any]
        The section, or an empty mapping when the file does not define it.

    Raises
    ------
    ValueError
        If the section is present but is not a mapping.
    """
    node = data.get(key)
    if node is None:
        return {}
    if not isinstance(node, dict):
        raise ValueError(f"'{key}' must be a mapping of coefficient names to integers.")

    return node


def get_int(node: Mapping[str, Any], key: str, default: int, *, minimum: int = 0) -> int:
    """
    Read an integer coefficient, falling back to `default` when absent.

    Parameters
    ----------
    node : Mapping[str, Any]
        Mapping to read from.
    key : str
        Coefficient name.
    default : int
        Value used when `key` is missing or null.
    minimum : int, optional
        Smallest accepted value, by default 0.

    Returns
    -------
    int
        The coefficient.

    Raises
    ------
    ValueError
        If the value is not an integer (booleans included) or is below `minimum`.
    """
    value = node.get(key)
    if value is None:
        return default

    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' must be an integer, got {value!r}.")
    if value < minimum:
        raise ValueError(f"'{key}' must be >= {minimum}, got {value}.")

    return value
