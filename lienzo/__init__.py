"""Lienzo: editor de formas sobre un área de trabajo ajustada al viewport."""
