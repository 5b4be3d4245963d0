"""
Infrastructure layer for Huissier.
"""
