"""Pluggable dispatch of payments to interchangeable gateway families."""
