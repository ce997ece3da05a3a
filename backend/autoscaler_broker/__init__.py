"""
Autoscaler service broker

Validates autoscaling policies against the limits of a service plan
before they are handed to the API server for persistence.
"""

__version__ = "0.1.0"
