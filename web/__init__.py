"""
Web interface
"""
