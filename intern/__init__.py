"""Intern feed screen: header/list presentation slice built on Tk MVVM layers."""

__version__ = "0.1.0"
