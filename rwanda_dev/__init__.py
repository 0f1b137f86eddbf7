"""
Rwanda Development Analytics
============================
Schema, views and analytic queries over yearly economic, demographic,
education and health indicators for Rwanda (2000-2023).
"""
