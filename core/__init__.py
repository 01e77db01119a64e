"""Shared domain pieces: exceptions and DTOs."""
