# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""FastAPI API layer for the Auto Rating Engine.

This package exposes premium calculation over HTTP. It only consumes the
rating engine's public contract.
"""

__all__: list[str] = []
