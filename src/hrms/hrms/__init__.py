"""HRMS backend package.

This package is organized by feature modules (employees, leaves, payroll,
recruitment, performance, users) with a thin Flask controller layer and
service/repository layers over a document store.
"""
