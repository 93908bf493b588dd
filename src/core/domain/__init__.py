"""Modelos, vocabularios de opciones e idiomas.

El dominio no conoce HTTP ni la CLI: solo describe qué se envía a DeepL y
qué se recibe.
"""
