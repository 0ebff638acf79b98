"""Attribute storage layer.

This module reads and writes raw extended attribute bytes and composes
them with the naming and codec layers into typed accessors.
"""
