# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration descriptor used by the wiring tests."""

CONFIG = {
    "message": {"pre_message": "result is:"},
}
