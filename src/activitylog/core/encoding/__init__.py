"""Encoders for report output."""
