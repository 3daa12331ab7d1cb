"""
EasyDoc Appointment API

A FastAPI backend over MongoDB for booking medical appointments,
with bearer-token authentication and a simple admin role.
"""

__version__ = "1.0.0"
