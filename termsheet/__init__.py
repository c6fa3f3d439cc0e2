"""Spreadsheet building blocks: cell references, viewport, number and date formatting, colours and formula functions."""

__version__ = "2.8.4"