"""
Unified client for domain registrar HTTP APIs (Porkbun, Name.com)
"""

__version__ = "0.1.0"
