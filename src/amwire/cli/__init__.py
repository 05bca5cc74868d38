# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer command-line interface."""

from .app import app, main

__all__ = ["app", "main"]
