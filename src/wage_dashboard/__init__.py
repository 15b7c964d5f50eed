"""Wage Dashboard package.

Bilingual (Telugu/English) wage tracking: employees, daily earnings/expenses
records, filtering, summaries and exportable reports. Organized by feature modules
(employees, records, reports, ...) with a thin Flask controller layer over
service/repository layers.
"""
