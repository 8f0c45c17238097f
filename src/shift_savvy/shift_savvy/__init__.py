"""Shift Savvy package.

Personal attendance tracking against a configured work shift. Organized by
feature modules (shifts, attendance, statistics, ...) with a thin Flask
controller layer over service/repository layers.
"""
