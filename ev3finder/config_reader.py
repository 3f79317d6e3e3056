"""Reading destination lists from plain-text or YAML files."""

from __future__ import annotations

import enum
import logging
import os
from typing import Any, List, Union

import yaml

from ev3finder.vector3 import Vector3

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class ConfigError(Exception):
    """The destinations file is missing, unreadable or malformed."""


class FileFormat(enum.Enum):
    """Supported formats of the destinations file."""

    TEXT = "text"
    YAML = "yaml"


def _read_text(path: PathLike) -> List[Vector3]:
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError as exc:
        raise ConfigError(
            f"Failed to open file: {os.fspath(path)}; make sure the file exists and is accessible"
        ) from exc

    destinations = []
    for line in lines:
        if not line or line.startswith("#"):
            continue
        try:
            destinations.append(Vector3.from_string(line))
        except ValueError as exc:
            raise ConfigError(f"Invalid destination format: {line}") from exc
    return destinations


def _coordinate(entry: Any, key: str) -> float:
    try:
        return float(entry[key])
    except (KeyError, TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid destination entry: {entry!r}") from exc


def _read_yaml(path: PathLike) -> List[Vector3]:
    try:
        with open(path, encoding="utf-8") as handle:
            document = yaml.safe_load(handle)
    except OSError as exc:
        raise ConfigError(f"Failed to open file: {os.fspath(path)}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Malformed YAML in file: {os.fspath(path)}") from exc

    entries = document.get("destinations") if isinstance(document, dict) else None
    if entries is None:
        raise ConfigError(
            f"No destinations found in file: {os.fspath(path)}; make sure the file is formatted correctly"
        )
    if not isinstance(entries, list):
        raise ConfigError(f"'destinations' must be a sequence in file: {os.fspath(path)}")

    return [
        Vector3(_coordinate(entry, "x"), _coordinate(entry, "y"), _coordinate(entry, "z"))
        for entry in entries
    ]


def read_destinations(path: PathLike, file_format: FileFormat = FileFormat.TEXT) -> List[Vector3]:
    """Read destinations from ``path``; z of each vector is the heading angle.

    Text files hold one vector per line, such as ``(1 2 3)``; empty lines and
    lines starting with ``#`` are skipped. YAML files hold a ``destinations``
    sequence of mappings with ``x``, ``y`` and ``z`` keys.
    """
    if file_format is FileFormat.YAML:
        destinations = _read_yaml(path)
    else:
        destinations = _read_text(path)

    logger.info("Found destinations: ")
    for destination in destinations:
        logger.info(destination.to_string())
    return destinations