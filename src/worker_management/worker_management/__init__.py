"""Worker management payroll package.

Feature modules (employees, shifts, attendance, payroll, ...) sit behind a thin
Flask controller layer; salary arithmetic lives in pure functions under payroll.
"""
