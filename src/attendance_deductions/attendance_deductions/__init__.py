"""Attendance Deductions package.

Late-arrival salary deductions for payroll periods, organized by feature
modules (attendance, payroll, settings, deductions) with a thin Flask
controller layer over service/repository layers.
"""
