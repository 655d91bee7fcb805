"""Adapters binding the picker's ports to third-party libraries and hosts."""
