"""
Configuration Package

Tunable settings for the Cloudflare Stream client (see config/settings.py).
"""
