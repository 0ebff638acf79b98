"""Binary payload codecs.

This module converts identifier and timestamp attribute values
between their raw on-disk bytes and typed Python values.
"""
