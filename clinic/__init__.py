"""MediCare clinic application.

This package contains models, serializers, views and route registrations
implementing the booking API used by the MediCare web client.
"""
