"""Shared utilities for ddlkit."""
