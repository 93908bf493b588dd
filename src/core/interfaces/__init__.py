"""Contratos (Protocol) de los colaboradores de escritorio.

Los servicios dependen de estas abstracciones; `adapters.desktop` las
implementa y los tests las sustituyen por fakes.
"""
