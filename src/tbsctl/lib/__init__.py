# SPDX-FileCopyrightText: 2025-2026 tbsctl contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Library layer: command model, bridge invocations, execution, config."""
