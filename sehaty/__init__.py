"""
Sehaty API

A FastAPI backend for a multi-role healthcare appointment service: patients,
doctors and clinics register, book and cancel appointments, manage
prescriptions and health records, and follow their dashboards.
"""

__version__ = "1.0.0"
