"""
Reference Configuration

Static configuration for the rate tables and estimator defaults.
The bundled CSV tables live alongside these modules.
"""
