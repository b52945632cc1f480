"""Clinic management application: doctors, clinics, patients, prescriptions and doses.

This package contains models, serializers, services, views and route
registrations for the medtrack HTTP API.
"""
