"""Static package metadata surfaced by the CLI banner.

Keep these values in sync with ``pyproject.toml``; the ``info`` command and
``lib_log_filter`` without arguments print them via :func:`print_info`.
"""

from __future__ import annotations

from typing import Callable

name = "lib_log_filter"
title = "Composable message filters that decorate any emitter with a predicate"
version = "0.1.0"
author = "bitranox"
shell_command = "lib_log_filter"


def print_info(writer: Callable[[str], object] = print) -> None:
    """Write the metadata banner through ``writer`` one newline-terminated line at a time."""

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    writer(f"Info for {name}:\n")
    writer("\n")
    for label, value in fields:
        writer(f"    {label:<{pad}} = {value}\n")
