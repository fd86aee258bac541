"""Payroll System package.

HRIS and monthly payroll for Philippine small businesses, organized by feature
modules (employees, attendance, benefits, payroll, requests) with a thin Flask
controller layer over service/repository layers.
"""
