"""Overtime Payroll package.

Liquidates night/holiday surcharges and overtime for firefighter shifts under
Colombian labor rules. Organized by feature modules (payroll, holidays,
salary_tiers, ...) with a thin Flask controller layer over service/repository
layers.
"""
