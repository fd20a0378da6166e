"""Static package metadata surfaced to CLI commands and configuration discovery.

Keeps the distribution name, version, shell command, and the
lib_layered_config identifiers in one place so ``info``, ``--version`` and
the configuration loader agree on them.
"""

from __future__ import annotations

name = "resend_gateway"
title = "Resend transactional-email gateway with configuration checks and connectivity probing"
version = "1.0.0"
homepage = "https://github.com/argument-graph/resend-gateway"
author = "Argument Graph"
author_email = "dev@argument-graph.org"
shell_command = "resend-gateway"

#: Vendor/app/slug used by lib_layered_config to locate configuration files.
LAYEREDCONF_VENDOR = "argument-graph"
LAYEREDCONF_APP = "Resend Gateway"
LAYEREDCONF_SLUG = "resend-gateway"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for resend_gateway:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
