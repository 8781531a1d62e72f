# SPDX-FileCopyrightText: 2025-2026 tbsctl contributors
#
# SPDX-License-Identifier: Apache-2.0

"""CLI entry point for ``python -m tbsctl.cli``."""

from .main import main

if __name__ == "__main__":
    main()
