"""Payroll System package.

This package is organized by feature modules (employees, payroll, ...)
with a thin console controller layer on top of service/repository layers.
"""
