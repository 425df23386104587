"""Contratos (Protocol) entre la sesión y sus fuentes de datos.

La sesión depende de `LocationSource`; el adaptador HTTP y los fakes de los
tests lo implementan.
"""
