"""Client records package.

Organized by feature modules (clients, uploads) with a thin Flask controller
layer over service/repository layers.
"""
