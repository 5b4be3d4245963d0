"""
Application layer for Huissier.
"""
