"""Department / Employee master-detail package.

This package is organized by feature modules (departments, employees)
with a thin Flask controller layer over service/repository layers.
"""
