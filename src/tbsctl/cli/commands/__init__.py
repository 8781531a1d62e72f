# SPDX-FileCopyrightText: 2025-2026 tbsctl contributors
#
# SPDX-License-Identifier: Apache-2.0

"""CLI command modules.

Each module exposes ``register(subparsers)`` to add its argument parsers.
Device modules expose ``build_command(args)`` returning a command value (or
``None`` if the parsed arguments belong to another module); ``info`` exposes
``dispatch(args) -> bool`` for commands that only print.
"""
