"""
apkpack: packaging action planner for Android application modules.

Resolves an app module's declaration into packaging flags, rebuild inputs
and signing certificates, ready to be handed to an external command runner.
"""

__version__ = "1.0.0"
__author__ = "apkpack Team"
